"""Batch runner: confirmation gate, parallel file processing, aggregation."""

from datetime import datetime
from multiprocessing import Pool
import os
import time
from typing import Callable, Iterable

from loguru import logger
from tqdm import tqdm

from logpurge.core import (
    Config,
    FileOutcome,
    FileStatus,
    FolderStats,
    RunStatus,
    ensure_runnable,
)
from logpurge.discovery import ScanTarget
from logpurge.matching import StatementMatcher
from logpurge.processing.data_models import RunSummary
from logpurge.processing.file_transform import process_file
from logpurge.processing.worker_context import WorkerContext, init_worker, process_file_worker
from logpurge.utils.constants import CONFIRMATION_PROMPT

ConfirmFunction = Callable[[str], bool]
ProgressCallback = Callable[[FileOutcome], None]


def compute_folder_stats(outcomes: Iterable[FileOutcome]) -> dict[str, FolderStats]:
    """Group outcomes by parent directory.

    Args:
        outcomes: File outcomes in input order

    Returns:
        Folder path -> FolderStats, in order of first appearance
    """
    grouped: dict[str, list[FileOutcome]] = {}
    for outcome in outcomes:
        grouped.setdefault(os.path.dirname(outcome.path), []).append(outcome)

    stats = {}
    for folder, folder_outcomes in grouped.items():
        modified = [o for o in folder_outcomes if o.status is FileStatus.MODIFIED]
        stats[folder] = FolderStats(
            folder=folder,
            files_scanned=len(folder_outcomes),
            files_modified=len(modified),
            statements_changed=sum(o.change_count for o in modified),
        )
    return stats


def _log_outcome(outcome: FileOutcome, verbose: bool) -> None:
    if outcome.status is FileStatus.ERROR:
        logger.warning(f"✗ {outcome.path}: {outcome.error_message}")
        return
    if outcome.status is FileStatus.MODIFIED:
        message = f"  {outcome.path}: {outcome.change_count} statement(s)"
    else:
        message = f"  {outcome.path}: clean"
    if verbose:
        logger.info(message)
    else:
        logger.debug(message)


def _confirm(config: Config, ask: ConfirmFunction | None) -> bool:
    """Run the confirmation gate. Dry runs and pre-authorized runs skip it."""
    if config.dry_run or config.yes:
        return True
    if ask is None:
        logger.warning("⚠️  No confirmation available; pass --yes to modify files")
        return False
    return ask(CONFIRMATION_PROMPT)


def _process_multiprocessing(
    files: list[str],
    config: Config,
    jobs: int,
    on_result: Callable[[FileOutcome], None],
    matcher: StatementMatcher | None = None,
) -> list[tuple[int, FileOutcome]]:
    """Process files using a worker pool.

    Returns:
        (input position, outcome) pairs in completion order
    """
    context = WorkerContext.from_config(config, matcher)
    results: list[tuple[int, FileOutcome]] = []

    with Pool(processes=jobs, initializer=init_worker, initargs=(context,)) as pool:
        for index, outcome in pool.imap_unordered(process_file_worker, enumerate(files)):
            results.append((index, outcome))
            on_result(outcome)

    return results


def _process_single_threaded(
    files: list[str],
    config: Config,
    on_result: Callable[[FileOutcome], None],
    matcher: StatementMatcher | None = None,
) -> list[tuple[int, FileOutcome]]:
    """Process files one after another in this process."""
    results: list[tuple[int, FileOutcome]] = []
    for index, path in enumerate(files):
        outcome = process_file(path, config.mode, config.replace_with, config.dry_run, matcher)
        results.append((index, outcome))
        on_result(outcome)
    return results


def run_batch(
    file_paths: Iterable[str],
    config: Config,
    ask: ConfirmFunction | None = None,
    on_progress: ProgressCallback | None = None,
    target: ScanTarget | None = None,
    matcher: StatementMatcher | None = None,
    start_time: float | None = None,
) -> RunSummary:
    """Transform a set of files and aggregate the outcomes.

    Files are processed concurrently when ``config.jobs > 1``. One file's
    failure is recorded on its outcome and never affects the others.

    Args:
        file_paths: Files to process, already filtered by discovery
        config: Run options
        ask: Confirmation function, called at most once
        on_progress: Called with each outcome as soon as it completes
        target: Scan target, carried into the summary for reporting
        matcher: Matcher used instead of the mode's default (must be picklable
            when jobs > 1)
        start_time: Epoch seconds the run started at, when timing began before
            discovery; defaults to now

    Returns:
        RunSummary with status completed, nothing_to_do or cancelled

    Raises:
        ConfigError: If the options are invalid (before any file I/O)
    """
    ensure_runnable(config)

    if start_time is None:
        start_time = time.time()
    started_at = datetime.fromtimestamp(start_time)
    files = list(file_paths)

    if not files:
        return RunSummary(
            status=RunStatus.NOTHING_TO_DO, config=config, target=target, started_at=started_at
        )

    if not _confirm(config, ask):
        return RunSummary(
            status=RunStatus.CANCELLED, config=config, target=target, started_at=started_at
        )

    jobs = min(config.jobs, len(files))
    progress_bar = tqdm(
        total=len(files), desc="Purging console logs", unit="file", disable=config.quiet
    )

    def on_result(outcome: FileOutcome) -> None:
        progress_bar.update(1)
        progress_bar.set_postfix_str(os.path.basename(outcome.path))
        _log_outcome(outcome, config.verbose)
        if on_progress is not None:
            on_progress(outcome)

    try:
        if jobs > 1:
            if config.verbose:
                logger.info(f"  Using {jobs} parallel workers")
            results = _process_multiprocessing(files, config, jobs, on_result, matcher)
        else:
            results = _process_single_threaded(files, config, on_result, matcher)
    finally:
        progress_bar.close()

    outcomes = [outcome for _index, outcome in sorted(results, key=lambda r: r[0])]

    folder_stats = None
    if config.batch_folders or (target is not None and target.is_folder):
        folder_stats = compute_folder_stats(outcomes)

    return RunSummary(
        status=RunStatus.COMPLETED,
        config=config,
        outcomes=outcomes,
        target=target,
        started_at=started_at,
        elapsed_time=time.time() - start_time,
        folder_stats=folder_stats,
    )
