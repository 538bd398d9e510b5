"""Copy domain types: jobs, worker outcomes, dispatch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Union

from cpj.errors import FileCopyError

# copy_fn(source, dest, hardlink); raises on failure
CopyFn = Callable[[str, str, bool], None]

FinishReason = Literal["drained", "stopped_on_error", "aborted"]


@dataclass(frozen=True)
class Job:
    source: str
    dest: str


@dataclass(frozen=True)
class WorkerFinished:
    """Terminal event. Every worker emits exactly one."""

    worker_id: int
    reason: FinishReason = "drained"
    copied: int = 0


@dataclass(frozen=True)
class JobFailed:
    worker_id: int
    source: str
    dest: str
    error: BaseException

    def to_error(self) -> FileCopyError:
        return FileCopyError(self.worker_id, self.source, self.dest, self.error)


JobOutcome = Union[WorkerFinished, JobFailed]


@dataclass
class DispatchResult:
    errors: list[FileCopyError] = field(default_factory=list)
    files: int = 0
    copied: int = 0
    workers: int = 0
    elapsed_s: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors

