"""Helper functions for report generation."""

import os

_ACTION_VERBS = {"remove": "Removed", "comment": "Commented", "replace": "Replaced"}


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string
    """
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"


def format_bytes(size: int) -> str:
    """Format a byte count with its KB equivalent, e.g. '2048 bytes (2.00 KB)'."""
    return f"{size} bytes ({size / 1024:.2f} KB)"


def action_verb(mode: str) -> str:
    """Past-tense verb for a mode, e.g. 'Removed' for remove."""
    return _ACTION_VERBS.get(mode, mode.capitalize())


def display_path(path: str) -> str:
    """Show paths under the working directory relative to it."""
    cwd = os.getcwd()
    if path.startswith(cwd):
        return "." + path[len(cwd) :]
    return path


def truncate(text: str, limit: int) -> str:
    """Cut text to ``limit`` characters, ending with '...' when shortened."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
