"""Type definitions for LogPurge."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

# Rewrite policy applied to every match in a run
Mode = Literal["remove", "comment", "replace"]

MODES: tuple[str, ...] = ("remove", "comment", "replace")


class StatementType(Enum):
    """Console method named by a matched statement."""

    LOG = "log"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"
    ASSERT = "assert"
    DIR = "dir"
    TABLE = "table"


class RewriteAction(Enum):
    """What happened to a matched statement."""

    REMOVED = "removed"
    COMMENTED = "commented"
    REPLACED = "replaced"


class FileStatus(Enum):
    """Per-file result of a transformation."""

    MODIFIED = "modified"
    CLEAN = "clean"
    ERROR = "error"


class RunStatus(Enum):
    """Terminal state of a batch run."""

    COMPLETED = "completed"
    NOTHING_TO_DO = "nothing_to_do"  # discovery found no files
    CANCELLED = "cancelled"  # confirmation declined


@dataclass(frozen=True)
class MatchedStatement:
    """One console statement found in a text buffer.

    Attributes:
        subtype: Console method following ``console.``
        start: Offset of the first matched character
        end: Offset one past the last matched character
        text: Matched text, including a trailing semicolon when present
        line_number: 1-based line on which the match starts
    """

    subtype: StatementType
    start: int
    end: int
    text: str
    line_number: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class RewriteRecord:
    """Replacement chosen for a single match."""

    action: RewriteAction
    replacement_text: str


@dataclass(frozen=True)
class FileOutcome:
    """Result of transforming one file.

    Attributes:
        path: File path as given by discovery
        status: modified, clean or error
        change_count: Number of statements rewritten
        records: (match, rewrite) pairs in document order
        size_before: Original size in UTF-8 bytes
        size_after: Size after rewriting in UTF-8 bytes
        lines_before: Original line count
        lines_after: Line count after rewriting
        error_message: Failure description, set only when status is error
    """

    path: str
    status: FileStatus
    change_count: int = 0
    records: tuple[tuple[MatchedStatement, RewriteRecord], ...] = ()
    size_before: int = 0
    size_after: int = 0
    lines_before: int = 0
    lines_after: int = 0
    error_message: str | None = None

    @property
    def size_reduction(self) -> int:
        return self.size_before - self.size_after

    @property
    def lines_reduced(self) -> int:
        return self.lines_before - self.lines_after


@dataclass(frozen=True)
class FolderStats:
    """Per-folder counts derived from file outcomes."""

    folder: str
    files_scanned: int
    files_modified: int
    statements_changed: int
