"""Core domain logic for LogPurge."""

from .config import Config, ConfigError, ensure_runnable, load_config
from .rewriter import apply_rewrite
from .types import (
    MODES,
    FileOutcome,
    FileStatus,
    FolderStats,
    MatchedStatement,
    Mode,
    RewriteAction,
    RewriteRecord,
    RunStatus,
    StatementType,
)

__all__ = [
    "MODES",
    "Config",
    "ConfigError",
    "FileOutcome",
    "FileStatus",
    "FolderStats",
    "MatchedStatement",
    "Mode",
    "RewriteAction",
    "RewriteRecord",
    "RunStatus",
    "StatementType",
    "apply_rewrite",
    "ensure_runnable",
    "load_config",
]
