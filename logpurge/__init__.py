"""LogPurge - console statement cleaner.

Find console.* calls across a source tree and remove, comment out, or
replace them.
"""

from logpurge._version import __version__
from logpurge.core import Config, ConfigError, load_config
from logpurge.matching import StatementMatcher, find_all
from logpurge.processing import RunSummary, run_batch, run_pipeline, transform_content
from logpurge.reports import ReportDocument, build_report
from logpurge.utils.logging import setup_logger

__all__ = [
    "__version__",
    "Config",
    "ConfigError",
    "ReportDocument",
    "RunSummary",
    "StatementMatcher",
    "build_report",
    "find_all",
    "load_config",
    "run_batch",
    "run_pipeline",
    "setup_logger",
    "transform_content",
]
