"""Bounded worker pool returning index-aligned task outcomes."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..errors import PoolError

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

DEFAULT_WORKERS = 10


@dataclass(frozen=True)
class TaskOutcome(Generic[OutputT]):
    value: Optional[OutputT] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Job(Generic[InputT, OutputT]):
    """A task applied to every input, run by at most ``workers`` threads."""

    task: Callable[[InputT], OutputT]
    inputs: Sequence[InputT]
    workers: int = DEFAULT_WORKERS


def run_job(job: Job[InputT, OutputT]) -> List[TaskOutcome[OutputT]]:
    """Run every input through the job's task and wait for all of them.

    ``outcomes[i]`` always belongs to ``job.inputs[i]``, whatever order the
    tasks finish in. A task that raises gets its exception stored in its
    outcome; it never stops the other tasks. Only a failure of the pool
    itself raises ``PoolError``.
    """
    if not job.inputs:
        return []
    if job.workers < 1:
        raise PoolError(f"invalid worker count: {job.workers}")

    # Each slot is written once, by the worker that owns its index.
    outcomes: List[Optional[TaskOutcome[OutputT]]] = [None] * len(job.inputs)

    def _work(index: int, item: InputT) -> None:
        try:
            outcomes[index] = TaskOutcome(value=job.task(item))
        except Exception as exc:
            outcomes[index] = TaskOutcome(error=exc)

    workers = min(job.workers, len(job.inputs))
    logger.debug("Running %d task(s) on %d worker(s)", len(job.inputs), workers)
    try:
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="market-feed")
    except (ValueError, RuntimeError) as exc:
        raise PoolError(f"could not start worker pool: {exc}") from exc

    with executor:
        try:
            futures = [executor.submit(_work, i, item) for i, item in enumerate(job.inputs)]
        except RuntimeError as exc:
            raise PoolError(f"worker pool rejected work: {exc}") from exc
        wait(futures)

    return outcomes  # type: ignore[return-value]
