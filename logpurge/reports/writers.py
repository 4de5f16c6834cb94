"""Report file writers (Markdown and JSON)."""

from pathlib import Path
from typing import TextIO

from loguru import logger

from logpurge.reports.data import ReportDocument
from logpurge.reports.helpers import action_verb, display_path, format_bytes, truncate
from logpurge.utils import write_file_safely
from logpurge.utils.constants import MAX_LISTED_CLEAN_FILES, REPORT_CONTENT_PREVIEW


def _write_executive_summary(f: TextIO, doc: ReportDocument) -> None:
    elapsed_ms = doc.timing.elapsed_seconds * 1000
    f.write("## Executive Summary\n\n")
    f.write("| Metric | Value |\n")
    f.write("|--------|-------|\n")
    f.write(f"| **Execution Date** | {doc.executed_at.strftime('%Y-%m-%d %H:%M:%S')} |\n")
    f.write(
        f"| **Execution Time** | {elapsed_ms:.0f}ms ({doc.timing.elapsed_seconds:.2f}s) |\n"
    )
    f.write(f"| **Operation Mode** | {doc.mode.upper()} |\n")
    f.write(f"| **{'Folder Path' if doc.is_folder else 'Glob Pattern'}** | `{doc.target}` |\n")
    if doc.is_folder:
        f.write(f"| **File Extensions** | `{','.join(doc.extensions)}` |\n")
    f.write(f"| **Dry Run Mode** | {'Yes' if doc.dry_run else 'No'} |\n")
    f.write(f"| **Files Scanned** | {doc.files_scanned} |\n")
    f.write(f"| **Files Modified** | {doc.files_modified} |\n")
    f.write(f"| **Files Clean** | {doc.files_clean} |\n")
    f.write(f"| **Files with Errors** | {doc.files_with_errors} |\n")
    f.write(f"| **Console Statements {action_verb(doc.mode)}** | {doc.statements_changed} |\n")
    if doc.mode == "remove":
        f.write(f"| **Total Size Reduction** | {format_bytes(doc.total_size_reduction)} |\n")
        f.write(f"| **Total Lines Reduced** | {doc.total_lines_reduced} |\n")
    f.write("\n")


def _write_folder_statistics(f: TextIO, doc: ReportDocument) -> None:
    if doc.folders is None:
        return
    f.write("## Folder Statistics\n\n")
    f.write(
        "| Folder | Files Scanned | Files Modified "
        f"| Console Statements {action_verb(doc.mode)} |\n"
    )
    f.write("|--------|---------------|----------------|----------|\n")
    for folder in doc.folders:
        f.write(
            f"| `{display_path(folder.folder) or '.'}` | {folder.files_scanned} "
            f"| {folder.files_modified} | {folder.statements_changed} |\n"
        )
    f.write("\n")


def _write_type_breakdown(f: TextIO, doc: ReportDocument) -> None:
    if not doc.type_breakdown:
        return
    f.write("## Console Log Type Breakdown\n\n")
    f.write("| Log Type | Count | Action |\n")
    f.write("|----------|-------|--------|\n")
    for entry in doc.type_breakdown:
        f.write(f"| `console.{entry.subtype}()` | {entry.count} | {entry.action} |\n")
    f.write("\n")


def _write_modified_files(f: TextIO, doc: ReportDocument) -> None:
    if not doc.modified_files:
        return
    verb = action_verb(doc.mode).lower()
    f.write("## Modified Files Details\n\n")
    for index, file in enumerate(doc.modified_files, start=1):
        f.write(f"### {index}. `{file.name}`\n\n")
        f.write(f"**Path:** `{display_path(file.path)}`\n\n")
        f.write("**Summary:**\n")
        f.write(f"- **Console statements {verb}:** {file.changes}\n")
        f.write(f"- **Original size:** {file.size_before} bytes ({file.lines_before} lines)\n")
        f.write(f"- **New size:** {file.size_after} bytes ({file.lines_after} lines)\n")
        if file.size_reduction > 0:
            f.write(
                f"- **Size reduction:** {file.size_reduction} bytes "
                f"({file.lines_reduced} lines)\n"
            )
        f.write("\n")

        if file.statements:
            f.write("**Console statements found:**\n\n")
            f.write("| Line | Type | Action | Content |\n")
            f.write("|------|------|--------|----------|\n")
            for statement in file.statements:
                content = truncate(statement.content, REPORT_CONTENT_PREVIEW)
                content = content.replace("\n", " ").replace("|", "\\|")
                f.write(
                    f"| {statement.line} | `{statement.subtype}` | {statement.action} "
                    f"| `{content}` |\n"
                )
            f.write("\n")


def _write_clean_files(f: TextIO, doc: ReportDocument) -> None:
    if not doc.clean_files:
        return
    if len(doc.clean_files) <= MAX_LISTED_CLEAN_FILES:
        f.write("## Clean Files (No Console Statements)\n\n")
        for path in doc.clean_files:
            f.write(f"- `{Path(path).name}`\n")
        f.write("\n")
    else:
        f.write("## Clean Files\n\n")
        f.write(
            f"{len(doc.clean_files)} files were scanned and found to be clean "
            "(no console statements detected).\n\n"
        )


def _write_error_files(f: TextIO, doc: ReportDocument) -> None:
    if not doc.error_files:
        return
    f.write("## Files with Errors\n\n")
    for error in doc.error_files:
        f.write(f"### `{error.name}`\n")
        f.write(f"**Path:** `{error.path}`\n")
        f.write(f"**Error:** {error.message}\n\n")


def _write_configuration(f: TextIO, doc: ReportDocument) -> None:
    f.write("## Configuration\n\n")
    f.write("**Options:**\n")
    f.write(f"- **Mode:** {doc.mode}\n")
    if doc.replace_with:
        f.write(f"- **Replace With:** `{doc.replace_with}`\n")
    if doc.ignore:
        f.write(f"- **Ignore Patterns:** `{', '.join(doc.ignore)}`\n")
    f.write(f"- **Dry Run:** {str(doc.dry_run).lower()}\n")
    f.write(f"- **Auto-confirm:** {str(doc.auto_confirm).lower()}\n")
    f.write("\n")


def _write_performance(f: TextIO, doc: ReportDocument) -> None:
    timing = doc.timing
    f.write("## Performance Metrics\n\n")
    f.write(f"- **Total execution time:** {timing.elapsed_seconds * 1000:.0f}ms\n")
    f.write(f"- **Average time per file:** {timing.average_ms_per_file:.2f}ms\n")
    f.write(f"- **Files processed per second:** {timing.files_per_second:.2f}\n")
    f.write(
        f"- **Console statements processed per second:** {timing.statements_per_second:.2f}\n"
    )
    f.write("\n")


def render_markdown(f: TextIO, doc: ReportDocument) -> None:
    """Write the Markdown rendering of ``doc`` to an open file."""
    f.write("# Log-Purge Execution Report\n\n")
    _write_executive_summary(f, doc)
    _write_folder_statistics(f, doc)
    _write_type_breakdown(f, doc)
    _write_modified_files(f, doc)
    _write_clean_files(f, doc)
    _write_error_files(f, doc)
    _write_configuration(f, doc)
    _write_performance(f, doc)
    f.write("---\n")
    f.write(f"*Report generated by LogPurge v{doc.tool_version}*\n")


def write_report(doc: ReportDocument, report_path: str | Path) -> Path:
    """Write ``doc`` to disk; a ``.json`` suffix selects JSON, anything else Markdown.

    Args:
        doc: Report document
        report_path: Destination file

    Returns:
        Path of the written report
    """
    path = Path(report_path)

    if path.suffix.lower() == ".json":

        def write_content(f: TextIO) -> None:
            f.write(doc.model_dump_json(indent=2))
            f.write("\n")

    else:

        def write_content(f: TextIO) -> None:
            render_markdown(f, doc)

    write_file_safely(path, write_content, "writing report")
    logger.info(f"✓ Report saved to {path}")
    return path
