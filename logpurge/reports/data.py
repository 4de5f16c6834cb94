"""Report document models.

Everything a report writer prints comes from these fields.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class StatementDetail(BaseModel):
    """One rewritten statement."""

    line: int = Field(ge=1)
    subtype: str
    action: str
    content: str


class FileDetail(BaseModel):
    """A modified file and the statements rewritten in it."""

    path: str
    name: str
    changes: int = Field(ge=0)
    size_before: int
    size_after: int
    lines_before: int
    lines_after: int
    size_reduction: int
    lines_reduced: int
    statements: list[StatementDetail] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    """A file that could not be read or written."""

    path: str
    name: str
    message: str


class TypeBreakdown(BaseModel):
    """How often a console method was rewritten, and how."""

    subtype: str
    action: str
    count: int = Field(ge=0)


class FolderBreakdown(BaseModel):
    """Per-folder counts."""

    folder: str
    files_scanned: int = Field(ge=0)
    files_modified: int = Field(ge=0)
    statements_changed: int = Field(ge=0)


class Timing(BaseModel):
    """Run duration and throughput."""

    elapsed_seconds: float = Field(0.0, ge=0)
    average_ms_per_file: float = Field(0.0, ge=0)
    files_per_second: float = Field(0.0, ge=0)
    statements_per_second: float = Field(0.0, ge=0)


class ReportDocument(BaseModel):
    """Serializable summary of a run."""

    tool_version: str
    executed_at: datetime
    status: str

    # Options
    mode: str
    dry_run: bool
    auto_confirm: bool
    replace_with: str | None = None
    ignore: list[str] = Field(default_factory=list)

    # Target
    target: str
    is_folder: bool = False
    extensions: list[str] = Field(default_factory=list)

    # Counts
    files_scanned: int = 0
    files_modified: int = 0
    files_clean: int = 0
    files_with_errors: int = 0
    statements_changed: int = 0
    total_size_reduction: int = 0
    total_lines_reduced: int = 0

    # Breakdowns
    type_breakdown: list[TypeBreakdown] = Field(default_factory=list)
    folders: list[FolderBreakdown] | None = None
    modified_files: list[FileDetail] = Field(default_factory=list)
    clean_files: list[str] = Field(default_factory=list)
    error_files: list[ErrorDetail] = Field(default_factory=list)

    timing: Timing = Field(default_factory=Timing)
