"""Console summary of a run."""

from loguru import logger

from logpurge.reports.data import ReportDocument
from logpurge.reports.helpers import action_verb, format_bytes, format_time
from logpurge.utils.constants import MAX_LISTED_MODIFIED_FILES


def log_run_summary(doc: ReportDocument) -> None:
    """Log the operation summary shown at the end of a run."""
    if doc.folders is not None:
        logger.info("")
        logger.info("Folder Statistics:")
        for folder in doc.folders:
            name = folder.folder or "."
            if folder.files_modified > 0:
                logger.info(
                    f"  {name}: {folder.files_modified}/{folder.files_scanned} files modified "
                    f"({folder.statements_changed} changes)"
                )
            else:
                logger.info(f"  {name}: {folder.files_scanned} files scanned (clean)")

    logger.info("")
    logger.info("=" * 60)
    logger.info("Operation Summary")
    logger.info("-" * 60)
    if doc.dry_run:
        logger.info("DRY RUN MODE - No files were changed.")
    logger.info(f"Total Files Scanned:  {doc.files_scanned}")
    logger.info(f"Files Modified:       {doc.files_modified}")
    logger.info(f"Total Logs {action_verb(doc.mode) + ':':<10} {doc.statements_changed}")
    if doc.files_with_errors > 0:
        logger.warning(f"Files with Errors:    {doc.files_with_errors}")
    if doc.mode == "remove" and doc.total_size_reduction > 0:
        logger.info(f"Size Reduction:       {format_bytes(doc.total_size_reduction)}")
    logger.info(f"Elapsed:              {format_time(doc.timing.elapsed_seconds)}")
    logger.info("=" * 60)

    if 0 < len(doc.modified_files) < MAX_LISTED_MODIFIED_FILES:
        logger.info("Modified Files:")
        for file in doc.modified_files:
            logger.info(f"  - {file.path} ({file.changes} changes)")
