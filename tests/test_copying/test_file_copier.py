"""Tests for the single-file copy primitive and path resolution."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

from cpj.copying import file_copier
from cpj.copying.file_copier import absolute_path, copy_file
from cpj.errors import PathResolutionError

if TYPE_CHECKING:
    from pathlib import Path


class TestCopyFile:
    def test_copies_bytes_and_creates_parents(self, tmp_path: Path) -> None:
        src = tmp_path / "a.bin"
        src.write_bytes(b"\x00payload\xff")
        dest = tmp_path / "out" / "deep" / "a.bin"

        copy_file(str(src), str(dest))

        assert dest.read_bytes() == b"\x00payload\xff"
        assert not os.path.samefile(src, dest)

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        src.write_text("new")
        dest = tmp_path / "b.txt"
        dest.write_text("old and longer")

        copy_file(str(src), str(dest))
        assert dest.read_text() == "new"

    def test_destination_directory_is_an_error(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        src.write_text("a")
        (tmp_path / "b").mkdir()

        with pytest.raises(IsADirectoryError):
            copy_file(str(src), str(tmp_path / "b"))

    def test_missing_source_is_an_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            copy_file(str(tmp_path / "nope"), str(tmp_path / "out"))

    def test_hardlink(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        src.write_text("linked")
        dest = tmp_path / "sub" / "a.txt"

        copy_file(str(src), str(dest), hardlink=True)

        assert os.path.samefile(src, dest)

    def test_hardlink_refuses_existing_destination(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        src.write_text("a")
        dest = tmp_path / "b.txt"
        dest.write_text("b")

        with pytest.raises(FileExistsError):
            copy_file(str(src), str(dest), hardlink=True)
        assert dest.read_text() == "b"

    def test_hardlink_falls_back_to_copy(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def cross_device(src: str, dst: str) -> None:
            raise OSError(errno.EXDEV, "Invalid cross-device link")

        monkeypatch.setattr(file_copier.os, "link", cross_device)
        src = tmp_path / "a.txt"
        src.write_text("copied")
        dest = tmp_path / "b.txt"

        copy_file(str(src), str(dest), hardlink=True)

        assert dest.read_text() == "copied"
        assert not os.path.samefile(src, dest)


class TestAbsolutePath:
    def test_resolves_relative(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "d").mkdir()
        monkeypatch.chdir(tmp_path)
        assert absolute_path("d/../d") == str((tmp_path / "d").resolve())

    def test_resolves_symlink(self, tmp_path: Path) -> None:
        (tmp_path / "real").mkdir()
        os.symlink(tmp_path / "real", tmp_path / "alias")
        assert absolute_path(tmp_path / "alias") == str((tmp_path / "real").resolve())

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PathResolutionError):
            absolute_path(tmp_path / "missing")
