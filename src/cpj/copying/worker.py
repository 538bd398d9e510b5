"""Copy worker thread draining the shared job queue."""

from __future__ import annotations

import queue
import threading

from structlog.typing import FilteringBoundLogger

from cpj.copying.file_copier import copy_file
from cpj.copying.job_queue import JobQueue
from cpj.copying.types import CopyFn, FinishReason, JobFailed, JobOutcome, WorkerFinished
from cpj.infrastructure.logger import logger as default_logger


class CopyWorker(threading.Thread):
    """Claims jobs until the queue is empty, reporting failures as they happen.

    Only failures and the final ``WorkerFinished`` go onto the outcome
    channel, so channel traffic is bounded by workers plus errors.
    """

    def __init__(
        self,
        worker_id: int,
        jobs: JobQueue,
        outcomes: queue.Queue[JobOutcome],
        *,
        copy_fn: CopyFn = copy_file,
        hardlink: bool = False,
        continue_on_error: bool = False,
        log: FilteringBoundLogger | None = None,
    ) -> None:
        super().__init__(name=f"cpj-worker-{worker_id}", daemon=True)
        self.worker_id = worker_id
        self._jobs = jobs
        self._outcomes = outcomes
        self._copy_fn = copy_fn
        self._hardlink = hardlink
        self._continue_on_error = continue_on_error
        self._log = (log or default_logger).bind(worker_id=worker_id)

    def run(self) -> None:
        # overwritten on every normal exit from the loop
        reason: FinishReason = "aborted"
        copied = 0
        self._log.debug("Worker started")
        try:
            while True:
                job = self._jobs.claim()
                if job is None:
                    self._log.debug("Worker out of jobs")
                    reason = "drained"
                    break

                self._log.info("Copying", source=job.source, dest=job.dest)
                try:
                    self._copy_fn(job.source, job.dest, self._hardlink)
                except Exception as err:
                    self._log.info("Copy failed", source=job.source, dest=job.dest, error=str(err))
                    self._outcomes.put(JobFailed(self.worker_id, job.source, job.dest, err))
                    if not self._continue_on_error:
                        reason = "stopped_on_error"
                        break
                    self._log.info("Worker continuing after error")
                else:
                    copied += 1
        finally:
            self._outcomes.put(WorkerFinished(self.worker_id, reason, copied))
