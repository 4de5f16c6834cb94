"""Filesystem helpers for LogPurge."""

import os
from pathlib import Path
import tempfile
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ``~`` in a user-supplied path. Empty input gives None."""
    return os.path.expanduser(filepath) if filepath else None


def _log_os_error(error: OSError, action: str, path: str) -> None:
    if isinstance(error, PermissionError):
        logger.error(f"✗ Permission denied {action}: {path}")
        logger.error("  Check the permissions of the file and its folder, then run again")
    else:
        logger.error(f"✗ OS error {action} {path}: {error}")


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write a UTF-8 text file, creating missing parent folders first.

    Args:
        file_path: Destination file
        content_writer: Called with the open file handle
        operation_name: Used in the error line, e.g. "writing report"

    Raises:
        OSError: Logged with a ✗ line, then re-raised
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            content_writer(f)
    except OSError as e:
        _log_os_error(e, operation_name, str(path))
        raise


def replace_file_atomically(file_path: str | Path, content: str) -> None:
    """Replace a file's content through a temporary sibling file.

    The new content is written next to the target and moved over it with
    ``os.replace``, so readers see either the old or the new content. The
    original file mode is carried over.

    Args:
        file_path: File to overwrite
        content: New text content (written as UTF-8, newlines untranslated)

    Raises:
        OSError: If the temporary file cannot be written or moved into place
    """
    target = Path(file_path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if target.exists():
            os.chmod(tmp_name, os.stat(target).st_mode & 0o7777)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
