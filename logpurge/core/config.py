"""Configuration management for LogPurge."""

from __future__ import annotations

import json
import re
from argparse import ArgumentParser
from multiprocessing import cpu_count

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from logpurge.core.types import MODES, Mode
from logpurge.utils import expand_file_path
from logpurge.utils.constants import DEFAULT_EXTENSIONS, DEFAULT_REPORT_NAME

# Commas outside {} separate ignore patterns
_IGNORE_SEPARATOR = re.compile(r",(?![^{]*\})")


class ConfigError(ValueError):
    """Raised when options cannot describe a valid run.

    Always raised before any file is read or written.
    """


class Config(BaseModel):
    """Options for one purge run."""

    pattern: str | None = Field(None, description="Glob pattern or folder path to scan")
    mode: Mode = Field("remove", description="Rewrite policy")
    replace_with: str | None = Field(None, description="Replacement for replace mode")
    ignore: list[str] = Field(default_factory=list, description="Glob patterns to skip")
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Extensions scanned for folder patterns",
    )
    batch_folders: bool = False
    dry_run: bool = False
    yes: bool = False
    report: str | None = Field(None, description="Report file path")
    jobs: int = Field(default_factory=cpu_count, ge=1)
    verbose: bool = False
    debug: bool = False
    quiet: bool = False
    log_file: str | None = None

    @field_validator("ignore", mode="before")
    @classmethod
    def parse_ignore(cls, v):
        """Parse comma-separated string or array into a list.

        Commas inside brace groups belong to the pattern: `**/{vendor,dist}/**`.
        """
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [s.strip() for s in _IGNORE_SEPARATOR.split(v) if s.strip()]
        return [str(s).strip() for s in v if str(s).strip()]

    @field_validator("extensions", mode="before")
    @classmethod
    def parse_extensions(cls, v):
        """Parse extensions, dropping leading dots. Empty input means the defaults."""
        if isinstance(v, str):
            v = v.split(",")
        if not v:
            return list(DEFAULT_EXTENSIONS)
        parsed = [str(s).strip().lstrip(".").lower() for s in v]
        return [ext for ext in parsed if ext] or list(DEFAULT_EXTENSIONS)

    @field_validator("report", mode="before")
    @classmethod
    def parse_report(cls, v):
        """``True`` requests the default report name; ``False`` disables the report."""
        if v is True:
            return DEFAULT_REPORT_NAME
        if v is False or v == "":
            return None
        return expand_file_path(v) if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.mode == "replace" and not self.replace_with:
            raise ValueError('replace_with is required for "replace" mode')
        return self


def ensure_runnable(config: Config) -> None:
    """Re-check the constraints a run depends on.

    Configs built with ``model_construct`` skip pydantic validation, so the
    batch runner calls this before touching any file.

    Raises:
        ConfigError: If the mode is unknown or replace mode has no literal
    """
    if config.mode not in MODES:
        available = ", ".join(MODES)
        raise ConfigError(f"Unknown mode '{config.mode}'. Available modes: {available}")
    if config.mode == "replace" and not config.replace_with:
        raise ConfigError('The --replace-with option is required for "replace" mode')


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object.

    Raises:
        ConfigError: If the JSON is malformed or the merged values are invalid
    """

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ConfigError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "pattern": get_value("pattern", None),
        "mode": get_value("mode", "remove"),
        "replace_with": get_value("replace_with", None),
        "ignore": get_value("ignore", None),
        "extensions": get_value("extensions", None),
        "batch_folders": cli_args.batch_folders or json_config.get("batch_folders", False),
        "dry_run": cli_args.dry_run or json_config.get("dry_run", False),
        "yes": cli_args.yes or json_config.get("yes", False),
        "report": get_value("report", None),
        "jobs": get_value("jobs", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "quiet": cli_args.quiet or json_config.get("quiet", False),
        "log_file": get_value("log_file", None),
    }
    if config_dict["jobs"] is None:
        config_dict["jobs"] = cpu_count()

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ConfigError(f"Invalid configuration: {e}") from e
