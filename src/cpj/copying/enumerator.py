"""Source tree enumeration."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from structlog.typing import FilteringBoundLogger

from cpj.errors import TraversalError
from cpj.infrastructure.logger import logger as default_logger


@dataclass
class TreeListing:
    files: list[str]

    @property
    def count(self) -> int:
        return len(self.files)


def _scan(directory: str) -> Iterator[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return iter(list(entries))
    except OSError as err:
        raise TraversalError(directory, err.strerror or str(err)) from err


def _walk(root: str, log: FilteringBoundLogger) -> Iterator[str]:
    """Depth-first walk yielding every non-directory entry under ``root``.

    Entries come in the order the filesystem returns them. Symlinks are never
    followed, so a link to a directory is yielded as a file. Pending siblings
    live on an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    stack = [_scan(root)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as err:
            raise TraversalError(entry.path, err.strerror or str(err)) from err
        if is_dir:
            log.debug("Found directory", path=entry.path)
            stack.append(_scan(entry.path))
        else:
            log.debug("Found file", path=entry.path)
            yield entry.path


def enumerate_files(root: str, log: FilteringBoundLogger | None = None) -> TreeListing:
    """List every file under ``root`` in visit order.

    The first traversal error aborts the whole enumeration.
    """
    return TreeListing(files=list(_walk(root, log or default_logger)))
