"""Decision log for Privy.

Logging is off unless the config sets a log path. When on, every event is
one JSON line with an ISO timestamp. Logging must never break a launch, so
write failures are ignored.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from privy.core.config import Config

_logger: structlog.BoundLogger | None = None
_log_file: IO[str] | None = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings. Call once at startup."""
    global _logger, _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if config.log is None:
        _logger = None
        return

    try:
        config.log.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(config.log, "a", encoding="utf-8")
    except OSError:
        _logger = None
        return

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.BoundLogger,
        logger_factory=structlog.PrintLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()


def log_event(level: str, event: str, **kwargs) -> None:
    """Log an event, silently ignoring errors. No-op if logging not configured."""
    if _logger is None:
        return
    try:
        getattr(_logger, level)(event, **kwargs)
    except Exception:
        pass  # Logging is optional - don't fail the launch


def log_decision(decision: str, url: str, pattern: str | None = None) -> None:
    """Record the routing outcome for one URL ('private', 'normal' or 'rejected')."""
    entry: dict[str, str] = {"decision": decision, "url": url}
    if pattern is not None:
        entry["pattern"] = pattern
    log_event("info", "dispatch", **entry)
