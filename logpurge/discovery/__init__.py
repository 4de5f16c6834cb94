"""File discovery for LogPurge."""

from logpurge.discovery.files import (
    ScanTarget,
    discover_files,
    expand_braces,
    group_files_by_folder,
    is_ignored,
    resolve_scan_target,
)

__all__ = [
    "ScanTarget",
    "discover_files",
    "expand_braces",
    "group_files_by_folder",
    "is_ignored",
    "resolve_scan_target",
]
