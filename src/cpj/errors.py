"""Exception hierarchy for tree copies."""

from __future__ import annotations


class CopyError(Exception):
    """Base class for every error cpj raises or aggregates."""


class SetupError(CopyError):
    """Raised before any worker starts; the copy is aborted."""


class PathResolutionError(SetupError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot resolve {path}: {reason}")
        self.path = path


class SourceIsDirectoryError(SetupError):
    def __init__(self, source: str) -> None:
        super().__init__("source is a directory, but you did not provide --recurse")
        self.source = source


class DestinationNotDirectoryError(SetupError):
    def __init__(self, dest: str) -> None:
        super().__init__("source is a directory but destination is not")
        self.dest = dest


class TraversalError(CopyError):
    """The source tree could not be enumerated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"error walking {path}: {reason}")
        self.path = path


class FileCopyError(CopyError):
    """One job failed. The underlying exception is chained as ``__cause__``."""

    def __init__(self, worker_id: int, source: str, dest: str, error: BaseException) -> None:
        super().__init__(f"{source} -> {dest}: {error}")
        self.worker_id = worker_id
        self.source = source
        self.dest = dest
        self.__cause__ = error
