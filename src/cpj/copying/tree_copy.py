"""Top-level tree copy: setup checks, enumeration, mapping, dispatch."""

from __future__ import annotations

import os
import time

from structlog.typing import FilteringBoundLogger

from cpj.copying.dispatcher import dispatch_jobs
from cpj.copying.enumerator import enumerate_files
from cpj.copying.file_copier import absolute_path, copy_file
from cpj.copying.path_mapper import map_destinations
from cpj.copying.types import CopyFn, DispatchResult
from cpj.errors import DestinationNotDirectoryError, SourceIsDirectoryError
from cpj.infrastructure.config import CopyOptions
from cpj.infrastructure.logger import logger as default_logger


def _copy_single(
    source: str,
    dest: str,
    options: CopyOptions,
    copy_fn: CopyFn,
    log: FilteringBoundLogger,
) -> DispatchResult:
    if os.path.isdir(dest):
        dest = os.path.join(dest, os.path.basename(source))
    log.info("Copying", source=source, dest=dest)
    t0 = time.monotonic()
    copy_fn(source, dest, options.hardlink)
    return DispatchResult(files=1, copied=1, workers=0, elapsed_s=time.monotonic() - t0)


def parallel_copy(
    source: str,
    dest: str,
    options: CopyOptions | None = None,
    *,
    copy_fn: CopyFn = copy_file,
    log: FilteringBoundLogger | None = None,
) -> DispatchResult:
    """Copy ``source`` to ``dest``.

    A file source is copied directly. A directory source needs
    ``options.recurse`` and an existing destination directory; its files are
    then copied by ``options.jobs`` workers. Setup and traversal errors raise;
    per-file errors are returned in the result.
    """
    options = options or CopyOptions()
    log = log or default_logger

    src_abs = absolute_path(source)
    if not os.path.isdir(src_abs):
        return _copy_single(source, dest, options, copy_fn, log)
    if not options.recurse:
        raise SourceIsDirectoryError(src_abs)

    dest_abs = absolute_path(dest)
    if not os.path.isdir(dest_abs):
        raise DestinationNotDirectoryError(dest_abs)

    listing = enumerate_files(src_abs, log)
    log.debug("Enumerated source tree", root=src_abs, count=listing.count)
    dests = map_destinations(listing.files, src_abs, dest_abs)
    log.info("Files to be copied", count=listing.count, source=src_abs, dest=dest_abs)

    return dispatch_jobs(
        listing.files,
        dests,
        jobs=options.jobs,
        hardlink=options.hardlink,
        continue_on_error=options.continue_on_error,
        copy_fn=copy_fn,
        log=log,
    )
