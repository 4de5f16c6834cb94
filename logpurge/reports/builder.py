"""Build the serializable report document from a run summary."""

from collections import Counter
import os
from typing import TYPE_CHECKING

from logpurge._version import __version__
from logpurge.core import FileOutcome
from logpurge.reports.data import (
    ErrorDetail,
    FileDetail,
    FolderBreakdown,
    ReportDocument,
    StatementDetail,
    Timing,
    TypeBreakdown,
)

if TYPE_CHECKING:
    from logpurge.processing.data_models import RunSummary


def _file_detail(outcome: FileOutcome) -> FileDetail:
    return FileDetail(
        path=outcome.path,
        name=os.path.basename(outcome.path),
        changes=outcome.change_count,
        size_before=outcome.size_before,
        size_after=outcome.size_after,
        lines_before=outcome.lines_before,
        lines_after=outcome.lines_after,
        size_reduction=outcome.size_reduction,
        lines_reduced=outcome.lines_reduced,
        statements=[
            StatementDetail(
                line=match.line_number,
                subtype=match.subtype.value,
                action=record.action.value,
                content=match.text.strip(),
            )
            for match, record in outcome.records
        ],
    )


def _type_breakdown(modified: list[FileOutcome]) -> list[TypeBreakdown]:
    counts: Counter[tuple[str, str]] = Counter()
    for outcome in modified:
        for match, record in outcome.records:
            counts[(match.subtype.value, record.action.value)] += 1
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        TypeBreakdown(subtype=subtype, action=action, count=count)
        for (subtype, action), count in ordered
    ]


def _folder_breakdown(summary: "RunSummary") -> list[FolderBreakdown] | None:
    if summary.folder_stats is None:
        return None
    stats = sorted(summary.folder_stats.values(), key=lambda s: -s.statements_changed)
    return [
        FolderBreakdown(
            folder=s.folder,
            files_scanned=s.files_scanned,
            files_modified=s.files_modified,
            statements_changed=s.statements_changed,
        )
        for s in stats
    ]


def _timing(summary: "RunSummary") -> Timing:
    elapsed = summary.elapsed_time
    files = summary.files_scanned
    return Timing(
        elapsed_seconds=elapsed,
        average_ms_per_file=(elapsed * 1000 / files) if files else 0.0,
        files_per_second=(files / elapsed) if elapsed > 0 else 0.0,
        statements_per_second=(summary.total_changes / elapsed) if elapsed > 0 else 0.0,
    )


def build_report(summary: "RunSummary") -> ReportDocument:
    """Turn a run summary into a ReportDocument.

    Pure function: no I/O and no clock reads; the execution timestamp is the
    one recorded on the summary.

    Args:
        summary: Aggregated run result

    Returns:
        ReportDocument ready for presentation or serialization
    """
    config = summary.config
    target = summary.target
    modified = summary.modified_files

    return ReportDocument(
        tool_version=__version__,
        executed_at=summary.started_at,
        status=summary.status.value,
        mode=config.mode,
        dry_run=config.dry_run,
        auto_confirm=config.yes,
        replace_with=config.replace_with,
        ignore=list(config.ignore),
        target=target.label if target else (config.pattern or ""),
        is_folder=bool(target and target.is_folder),
        extensions=list(target.extensions) if target else [],
        files_scanned=summary.files_scanned,
        files_modified=len(modified),
        files_clean=len(summary.clean_files),
        files_with_errors=len(summary.error_files),
        statements_changed=summary.total_changes,
        total_size_reduction=summary.total_size_reduction,
        total_lines_reduced=summary.total_lines_reduced,
        type_breakdown=_type_breakdown(modified),
        folders=_folder_breakdown(summary),
        modified_files=[_file_detail(o) for o in modified],
        clean_files=[o.path for o in summary.clean_files],
        error_files=[
            ErrorDetail(
                path=o.path,
                name=os.path.basename(o.path),
                message=o.error_message or "",
            )
            for o in summary.error_files
        ],
        timing=_timing(summary),
    )
