"""Main processing pipeline orchestration."""

import time

from loguru import logger

from logpurge.core import Config, ConfigError, RunStatus, ensure_runnable
from logpurge.matching import StatementMatcher
from logpurge.processing.batch import ConfirmFunction, ProgressCallback, run_batch
from logpurge.processing.data_models import RunSummary
from logpurge.processing.pipeline_helpers import discover, setup_log_file
from logpurge.reports import build_report, format_time, log_run_summary, write_report


def run_pipeline(
    config: Config,
    ask: ConfirmFunction | None = None,
    on_progress: ProgressCallback | None = None,
    matcher: StatementMatcher | None = None,
) -> RunSummary:
    """Discover files, transform them, and report.

    The run is timed from the start of discovery.

    Args:
        config: Configuration object containing all settings
        ask: Confirmation function used unless dry_run or yes is set
        on_progress: Called with each file outcome as it completes
        matcher: Matcher used instead of the mode's default

    Returns:
        RunSummary for the run (also for early exits)

    Raises:
        ConfigError: If options are invalid or no pattern was given
    """
    ensure_runnable(config)
    if not config.pattern:
        raise ConfigError("A glob pattern or folder path to scan is required")

    setup_log_file(config)

    start_time = time.time()
    target, files = discover(config)
    if not files:
        return run_batch(files, config, ask=ask, target=target, start_time=start_time)

    logger.info("")
    logger.info(f"Purging console logs... Mode: {config.mode.upper()}")

    summary = run_batch(
        files,
        config,
        ask=ask,
        on_progress=on_progress,
        target=target,
        matcher=matcher,
        start_time=start_time,
    )

    if summary.status is RunStatus.CANCELLED:
        logger.warning("Operation cancelled by user.")
        return summary

    logger.info("✓ All Done!")

    document = build_report(summary)
    log_run_summary(document)

    if config.report:
        write_report(document, config.report)

    if config.verbose:
        logger.info(f"Total processing time: {format_time(summary.elapsed_time)}")

    return summary
