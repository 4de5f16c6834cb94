"""Utility functions for LogPurge."""

from logpurge.utils.helpers import (
    expand_file_path,
    replace_file_atomically,
    write_file_safely,
)
from logpurge.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "expand_file_path",
    "replace_file_atomically",
    "setup_logger",
    "write_file_safely",
]
