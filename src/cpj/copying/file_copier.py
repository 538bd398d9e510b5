"""Single-file copy and hard-link primitive, plus path resolution."""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path

from cpj.errors import PathResolutionError
from cpj.infrastructure.logger import logger

# link() failures that mean "not possible here" rather than "wrong"
_LINK_FALLBACK_ERRNOS = frozenset(
    {errno.EXDEV, errno.EPERM, errno.EMLINK, errno.ENOTSUP, errno.EOPNOTSUPP}
)


def absolute_path(path: str | os.PathLike[str]) -> str:
    """Resolve symlinks and relative segments. The path must exist."""
    try:
        return str(Path(path).resolve(strict=True))
    except OSError as err:
        raise PathResolutionError(str(path), err.strerror or str(err)) from err


def copy_file(source: str, dest: str, hardlink: bool = False) -> None:
    """Duplicate ``source`` at ``dest``, creating parent directories.

    With ``hardlink`` the file is linked when the filesystem allows it and
    copied otherwise. A directory at ``dest`` is always an error; in link
    mode any existing entry at ``dest`` is too. Plain copies overwrite an
    existing file.
    """
    Path(dest).parent.mkdir(parents=True, exist_ok=True)

    if hardlink:
        try:
            os.link(source, dest)
            return
        except OSError as err:
            if err.errno not in _LINK_FALLBACK_ERRNOS:
                raise
            logger.debug("Hard link not possible, copying instead", source=source, dest=dest, error=str(err))

    if os.path.isdir(dest):
        raise IsADirectoryError(errno.EISDIR, "destination is a directory", dest)
    shutil.copyfile(source, dest)
