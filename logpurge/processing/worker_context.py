"""Worker context for multiprocessing without global state."""

import threading
from dataclasses import dataclass

from logpurge.core import FileOutcome
from logpurge.matching import StatementMatcher
from logpurge.processing.file_transform import process_file


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for file-processing workers.

    Attributes:
        mode: Rewrite policy (remove, comment, replace)
        replace_with: Literal used by replace mode
        dry_run: When True, workers never write files
        matcher: Matcher used instead of the mode's default (must be picklable)
    """

    mode: str
    replace_with: str | None
    dry_run: bool
    matcher: StatementMatcher | None = None

    @classmethod
    def from_config(cls, config, matcher: StatementMatcher | None = None) -> "WorkerContext":
        """Create WorkerContext from a Config object."""
        return cls(
            mode=config.mode,
            replace_with=config.replace_with,
            dry_run=config.dry_run,
            matcher=matcher,
        )


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage."""
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e


def process_file_worker(item: tuple[int, str]) -> tuple[int, FileOutcome]:
    """Worker function for multiprocessing.

    Args:
        item: (position in the input list, file path)

    Returns:
        Tuple of (position, outcome) so results can be put back in input order
    """
    index, path = item
    context = get_worker_context()
    outcome = process_file(
        path, context.mode, context.replace_with, context.dry_run, context.matcher
    )
    return index, outcome
