"""Rewrite policies applied to matched console statements."""

from logpurge.core.config import ConfigError
from logpurge.core.types import MODES, MatchedStatement, RewriteAction, RewriteRecord
from logpurge.utils.constants import COMMENT_PREFIX


def apply_rewrite(
    mode: str, match: MatchedStatement, replacement: str | None = None
) -> RewriteRecord:
    """Build the replacement for one match.

    Removal leaves an empty string; blank lines it produces are cleaned up
    by the caller over the whole file. Comment mode prefixes the matched text
    once and does not neutralize comment markers already inside it.

    Args:
        mode: remove, comment or replace
        match: Statement to rewrite
        replacement: Literal substituted in replace mode

    Returns:
        RewriteRecord describing the substitution

    Raises:
        ConfigError: If the mode is unknown or replace mode has no literal
    """
    if mode == "remove":
        return RewriteRecord(action=RewriteAction.REMOVED, replacement_text="")
    if mode == "comment":
        return RewriteRecord(
            action=RewriteAction.COMMENTED,
            replacement_text=f"{COMMENT_PREFIX}{match.text}",
        )
    if mode == "replace":
        if not replacement:
            raise ConfigError('A replacement literal is required for "replace" mode')
        return RewriteRecord(action=RewriteAction.REPLACED, replacement_text=replacement)
    raise ConfigError(f"Unknown mode '{mode}'. Available modes: {', '.join(MODES)}")
