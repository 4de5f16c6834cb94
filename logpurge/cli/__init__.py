"""Command-line entry points for LogPurge."""

from logpurge.cli.parser import create_parser
from logpurge.cli.prompt import confirm

__all__ = ["confirm", "create_parser"]
