"""
Routing patterns for private-mode dispatch.

Patterns come from user config and are untrusted: any of them may fail to
compile or backtrack catastrophically. Each one is searched with a hard
time budget inside the regex engine, so an evaluation that runs out of time
aborts itself and leaves nothing running. Invalid and timed-out patterns
count as non-matches.
"""

from __future__ import annotations

from collections.abc import Iterable

import regex

from privy.core.log import log_event

DEFAULT_TIMEOUT = 0.1  # seconds, per pattern


def first_match(
    url: str, patterns: Iterable[str], timeout: float = DEFAULT_TIMEOUT
) -> str | None:
    """Return the first pattern that matches url, or None.

    Matching is an unanchored, case-insensitive search.
    """
    for pattern in patterns:
        if _search(url, pattern, timeout):
            return pattern
    return None


def matches_any(
    url: str, patterns: Iterable[str], timeout: float = DEFAULT_TIMEOUT
) -> bool:
    """Check if url matches any pattern. Stops at the first match."""
    return first_match(url, patterns, timeout) is not None


def is_valid_pattern(pattern: str) -> bool:
    """Check that pattern compiles as a case-insensitive regex."""
    try:
        regex.compile(pattern, regex.IGNORECASE)
    except regex.error:
        return False
    return True


def _search(url: str, pattern: str, timeout: float) -> bool:
    if not pattern or pattern.isspace():
        return False
    try:
        found = regex.search(pattern, url, flags=regex.IGNORECASE, timeout=timeout)
    except regex.error as e:
        log_event("warning", "pattern_invalid", pattern=pattern, error=str(e))
        return False
    except TimeoutError:
        log_event("warning", "pattern_timeout", pattern=pattern, timeout=timeout)
        return False
    return found is not None
