from __future__ import annotations

import threading
from pathlib import Path

import pytest

from cpj.copying.file_copier import copy_file


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create src/{x.txt, sub/y.txt} under tmp_path."""
    root = tmp_path / "src"
    (root / "sub").mkdir(parents=True)
    (root / "x.txt").write_text("x contents")
    (root / "sub" / "y.txt").write_text("y contents")
    return root


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    dest = tmp_path / "dest"
    dest.mkdir()
    return dest


class RecordingCopy:
    """Copy primitive stub: records calls and fails for chosen sources."""

    def __init__(self, fail_names: set[str] | None = None, delegate: bool = False) -> None:
        self.fail_names = fail_names or set()
        self.delegate = delegate
        self.calls: list[tuple[str, str, bool]] = []
        self._lock = threading.Lock()

    def __call__(self, source: str, dest: str, hardlink: bool) -> None:
        with self._lock:
            self.calls.append((source, dest, hardlink))
        if Path(source).name in self.fail_names:
            raise PermissionError(13, "Permission denied", source)
        if self.delegate:
            copy_file(source, dest, hardlink)


@pytest.fixture
def recording_copy() -> type[RecordingCopy]:
    return RecordingCopy
