"""Helper functions for pipeline setup and discovery."""

from loguru import logger

from logpurge.core import Config
from logpurge.discovery import (
    ScanTarget,
    discover_files,
    group_files_by_folder,
    resolve_scan_target,
)
from logpurge.utils import add_log_file_handler


def setup_log_file(config: Config) -> None:
    """Mirror log output to ``config.log_file`` if one is configured."""
    if not config.log_file:
        return
    add_log_file_handler(
        config.log_file, verbose=config.verbose, debug=config.debug, quiet=config.quiet
    )
    if config.verbose:
        logger.info(f"Logs will be saved to: {config.log_file}")


def discover(config: Config) -> tuple[ScanTarget, list[str]]:
    """Resolve the configured pattern and list the files it covers.

    Args:
        config: Configuration object (``pattern`` must be set)

    Returns:
        Tuple of (scan target, file paths)
    """
    target = resolve_scan_target(config.pattern or "", config.extensions)
    if target.is_folder:
        logger.info(
            f"Scanning folder: {target.folder_path} for {','.join(target.extensions)} files..."
        )
    else:
        logger.info("Discovering files...")

    files = discover_files(target, config.ignore)

    if not files:
        logger.warning(f"⚠️  No files found matching pattern: {target.pattern}")
        return target, files

    folder_info = ""
    if config.batch_folders or target.is_folder:
        folder_count = len(group_files_by_folder(files))
        folder_info = f" across {folder_count} folders"
    logger.info(f"✓ Found {len(files)} files{folder_info} to analyze.")

    return target, files
