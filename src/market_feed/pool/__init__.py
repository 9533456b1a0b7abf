"""Concurrent batch fetching."""

from .executor import DEFAULT_WORKERS, Job, TaskOutcome, run_job
from .tasks import decode_json_task, fetch_and_decode

__all__ = ["DEFAULT_WORKERS", "Job", "TaskOutcome", "run_job", "decode_json_task", "fetch_and_decode"]
