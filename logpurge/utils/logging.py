"""Logging configuration for LogPurge using loguru."""

from pathlib import Path
import sys

from loguru import logger


def _resolve_level(verbose: bool, debug: bool, quiet: bool) -> str:
    if debug:
        return "DEBUG"
    if quiet and not verbose:
        return "WARNING"
    return "INFO"


def setup_logger(verbose: bool = False, debug: bool = False, quiet: bool = False) -> None:
    """Configure loguru logger based on verbosity flags.

    The run summary is logged at INFO, so INFO is the default level. ``quiet``
    drops to WARNING; ``verbose`` keeps INFO and enables per-file detail lines
    elsewhere.

    Args:
        verbose: Enable per-file INFO messages (overrides quiet)
        debug: Enable DEBUG level messages (overrides verbose and quiet)
        quiet: Only show warnings and errors
    """
    logger.remove()

    level = _resolve_level(verbose, debug, quiet)

    # For INFO and above: simple format without timestamp
    # For DEBUG: detailed format with timestamp and location
    if debug:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
    else:
        format_str = "<level>{message}</level>"

    logger.add(
        sys.stderr,
        format=format_str,
        level=level,
        colorize=True,
    )


def add_log_file_handler(
    log_file: str | Path, verbose: bool = False, debug: bool = False, quiet: bool = False
) -> None:
    """Add a file handler to the existing logger configuration.

    Existing handlers are kept, so logs go to both stderr and the file.

    Args:
        log_file: Path to log file
        verbose: Enable per-file INFO messages
        debug: Enable DEBUG level messages (overrides verbose)
        quiet: Only write warnings and errors
    """
    level = _resolve_level(verbose, debug, quiet)

    # File format (no color codes)
    if debug:
        file_format_str = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    else:
        file_format_str = "{message}"

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=file_format_str,
        level=level,
        colorize=False,
        encoding="utf-8",
    )
