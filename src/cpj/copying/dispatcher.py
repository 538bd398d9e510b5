"""Worker pool dispatch and outcome aggregation."""

from __future__ import annotations

import queue
import time

from structlog.typing import FilteringBoundLogger

from cpj.copying.file_copier import copy_file
from cpj.copying.job_queue import JobQueue
from cpj.copying.types import CopyFn, DispatchResult, JobFailed, JobOutcome, WorkerFinished
from cpj.copying.worker import CopyWorker
from cpj.infrastructure.logger import logger as default_logger


def dispatch_jobs(
    sources: list[str],
    dests: list[str],
    *,
    jobs: int = 1,
    hardlink: bool = False,
    continue_on_error: bool = False,
    copy_fn: CopyFn = copy_file,
    log: FilteringBoundLogger | None = None,
) -> DispatchResult:
    """Copy every ``sources[i]`` to ``dests[i]`` using a fixed pool of workers.

    The pool is clamped to the number of jobs. Returns once every worker has
    reported ``WorkerFinished``; per-file failures are collected, never raised.
    """
    log = log or default_logger
    job_queue = JobQueue(sources, dests)
    total = len(sources)
    workers = min(max(1, jobs), total)
    result = DispatchResult(files=total, workers=workers)
    if workers == 0:
        log.debug("Nothing to copy")
        return result

    log.debug("Starting workers", workers=workers, files=total)
    # each worker sends one terminal event; leave as much room again for failures
    outcomes: queue.Queue[JobOutcome] = queue.Queue(maxsize=workers * 2)
    pool = [
        CopyWorker(
            worker_id,
            job_queue,
            outcomes,
            copy_fn=copy_fn,
            hardlink=hardlink,
            continue_on_error=continue_on_error,
            log=log,
        )
        for worker_id in range(workers)
    ]

    t0 = time.monotonic()
    for worker in pool:
        worker.start()

    remaining = workers
    while remaining:
        outcome = outcomes.get()
        if isinstance(outcome, JobFailed):
            log.debug("Error collected", worker_id=outcome.worker_id, source=outcome.source)
            result.errors.append(outcome.to_error())
        elif isinstance(outcome, WorkerFinished):
            remaining -= 1
            result.copied += outcome.copied
            log.debug("Worker finished", worker_id=outcome.worker_id, reason=outcome.reason, remaining=remaining)

    for worker in pool:
        worker.join()
    result.elapsed_s = time.monotonic() - t0

    log.debug("All workers finished", errors=len(result.errors), copied=result.copied)
    return result
