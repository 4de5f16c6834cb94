"""Data models for passing run results to reporting."""

from dataclasses import dataclass, field
from datetime import datetime

from logpurge.core import Config, FileOutcome, FileStatus, FolderStats, RunStatus
from logpurge.discovery import ScanTarget


@dataclass
class RunSummary:
    """Aggregate result of one batch run.

    Outcomes are stored in input order, regardless of the order in which
    workers finished.
    """

    status: RunStatus
    config: Config
    outcomes: list[FileOutcome] = field(default_factory=list)
    target: ScanTarget | None = None
    started_at: datetime = field(default_factory=datetime.now)
    elapsed_time: float = 0.0
    folder_stats: dict[str, FolderStats] | None = None

    def _with_status(self, status: FileStatus) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def modified_files(self) -> list[FileOutcome]:
        return self._with_status(FileStatus.MODIFIED)

    @property
    def clean_files(self) -> list[FileOutcome]:
        return self._with_status(FileStatus.CLEAN)

    @property
    def error_files(self) -> list[FileOutcome]:
        return self._with_status(FileStatus.ERROR)

    @property
    def files_scanned(self) -> int:
        return len(self.outcomes)

    @property
    def total_changes(self) -> int:
        return sum(o.change_count for o in self.modified_files)

    @property
    def total_size_reduction(self) -> int:
        return sum(o.size_reduction for o in self.modified_files)

    @property
    def total_lines_reduced(self) -> int:
        return sum(o.lines_reduced for o in self.modified_files)
