"""Command-line interface for LogPurge."""

import argparse
from multiprocessing import cpu_count

from logpurge._version import __version__
from logpurge.core import MODES
from logpurge.utils.constants import DEFAULT_EXTENSIONS, DEFAULT_REPORT_NAME


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="logpurge",
        description="Remove, comment out, or replace console.* statements across a code base",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Remove every console statement under src/ (asks for confirmation)
  %(prog)s "src/**/*.js"

  # Scan a folder for the default extensions ({','.join(DEFAULT_EXTENSIONS)})
  %(prog)s src --batch-folders

  # Preview what comment mode would change, with a Markdown report
  %(prog)s src --mode comment --dry-run --report

  # Route console calls through a logger, skipping vendored code
  %(prog)s "src/**/*.ts" -m replace -r "logger.info(" -i "**/vendor/**" -y

  # Using JSON config
  %(prog)s --config logpurge.json

Example logpurge.json:
{{
  "pattern": "src",
  "mode": "comment",
  "ignore": ["**/node_modules/**", "**/*.min.js"],
  "extensions": ["js", "ts"],
  "dry_run": true,
  "report": "reports/log-purge.md",
  "jobs": 4
}}

Notes:
- Matching is textual. A statement ends at the last ")" before the first ";",
  so arguments containing ";" are not matched in full.
- Remove mode deletes every blank line in files it modifies.
        """,
    )

    parser.add_argument(
        "pattern",
        nargs="?",
        default=None,
        help='Glob pattern for files to scan (e.g. "src/**/*.js") or a folder path',
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Operation
    parser.add_argument(
        "-m",
        "--mode",
        type=str,
        choices=list(MODES),
        default="remove",
        help="Operation mode: remove, comment, or replace (default: remove)",
    )
    parser.add_argument(
        "-r",
        "--replace-with",
        dest="replace_with",
        type=str,
        help='Replacement for "replace" mode (e.g. "logger.info(")',
    )

    # Discovery
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        help="Comma-separated glob patterns for files to ignore",
    )
    parser.add_argument(
        "--extensions",
        type=str,
        help="Comma-separated file extensions scanned for folder paths "
        f"(default: {','.join(DEFAULT_EXTENSIONS)})",
    )
    parser.add_argument(
        "--batch-folders",
        action="store_true",
        help="Show per-folder statistics",
    )

    # Safety
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan files and show what would change without modifying them",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt before making changes",
    )

    # Output
    parser.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=None,
        metavar="FILENAME",
        help=f"Write a summary report (default name: {DEFAULT_REPORT_NAME}; "
        "a .json name writes JSON)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log output to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file processed")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: {cpu_count()})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser
