"""Report generation for LogPurge."""

from .builder import build_report
from .data import (
    ErrorDetail,
    FileDetail,
    FolderBreakdown,
    ReportDocument,
    StatementDetail,
    Timing,
    TypeBreakdown,
)
from .helpers import format_time
from .summary import log_run_summary
from .writers import render_markdown, write_report

__all__ = [
    "ErrorDetail",
    "FileDetail",
    "FolderBreakdown",
    "ReportDocument",
    "StatementDetail",
    "Timing",
    "TypeBreakdown",
    "build_report",
    "format_time",
    "log_run_summary",
    "render_markdown",
    "write_report",
]
