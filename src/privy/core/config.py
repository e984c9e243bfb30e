"""Privy configuration: routing patterns and launch settings.

Config files are line based:

    # comment
    private <regex>
    set browser <path>
    set private-flag <token>
    set timeout-ms <int>
    set log <path>
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path

from privy.core.log import log_event
from privy.core.patterns import is_valid_pattern

USER_CONFIG = Path.home() / ".privy" / "config"
ENV_CONFIG = "PRIVY_CONFIG"

DEFAULT_PRIVATE_FLAG = "--inprivate"
DEFAULT_TIMEOUT_MS = 100

# Config scopes in priority order (lowest to highest)
SCOPE_USER = "user"
SCOPE_ENV = "env"


@dataclass
class Route:
    """A private-mode routing pattern with origin tracking."""

    pattern: str
    source: str | None = None  # file path
    scope: str | None = None  # user/env


@dataclass
class Config:
    """Parsed configuration."""

    routes: list[Route] = field(default_factory=list)
    """Routing patterns in load order."""

    browser: Path | None = None  # None = look the browser up
    private_flag: str | None = None  # None = DEFAULT_PRIVATE_FLAG
    timeout_ms: int | None = None  # None = DEFAULT_TIMEOUT_MS
    log: Path | None = None  # None = no logging

    @property
    def resolved_private_flag(self) -> str:
        """Private-mode flag, with the default applied."""
        if self.private_flag is None:
            return DEFAULT_PRIVATE_FLAG
        return self.private_flag

    @property
    def timeout(self) -> float:
        """Per-pattern match budget in seconds, with the default applied."""
        if self.timeout_ms is None:
            return DEFAULT_TIMEOUT_MS / 1000
        return self.timeout_ms / 1000


# === Config Loading ===


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Routes accumulate in order, settings override.

    A setting the overlay does not mention is None and keeps the base value;
    one it sets wins, even when it equals the default.
    """
    return replace(
        base,
        routes=base.routes + overlay.routes,
        browser=overlay.browser if overlay.browser is not None else base.browser,
        private_flag=overlay.private_flag
        if overlay.private_flag is not None
        else base.private_flag,
        timeout_ms=overlay.timeout_ms
        if overlay.timeout_ms is not None
        else base.timeout_ms,
        log=overlay.log if overlay.log is not None else base.log,
    )


def _tag_routes(config: Config, source: str, scope: str) -> Config:
    """Tag all routes in config with source file and scope."""
    return replace(
        config,
        routes=[replace(r, source=source, scope=scope) for r in config.routes],
    )


def _load_config_file(path: Path, scope: str) -> Config | None:
    """Parse one config file. Returns None (after a warning) if it is broken."""
    try:
        config = parse_config(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Warning: Failed to load {path}: {e}", file=sys.stderr)
        return None
    return _tag_routes(config, str(path), scope)


def load_config() -> Config:
    """Load config from ~/.privy/config, then $PRIVY_CONFIG. Later settings win.

    A file that fails to parse is skipped with a warning so that a typo in the
    config never stops a link from opening.
    """
    config = Config()

    # 1. User config (lowest priority)
    if USER_CONFIG.is_file():
        user_config = _load_config_file(USER_CONFIG, SCOPE_USER)
        if user_config is not None:
            config = _merge_configs(config, user_config)

    # 2. Env override (highest priority)
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        env_config_path = Path(env_path).expanduser()
        if env_config_path.is_file():
            env_config = _load_config_file(env_config_path, SCOPE_ENV)
            if env_config is not None:
                config = _merge_configs(config, env_config)

    return config


def parse_config(text: str) -> Config:
    """Parse config text into Config object. Raises ValueError on syntax errors."""
    routes: list[Route] = []
    settings: dict[str, int | str | Path] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(None, 1)
        directive = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        try:
            if directive == "private":
                if not rest:
                    raise ValueError("requires a pattern")
                # Whole rest of line: regexes may contain '#' and spaces
                routes.append(Route(rest))

            elif directive == "set":
                _apply_setting(settings, rest)

            else:
                raise ValueError(f"unknown directive '{directive}'")

        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    return Config(
        routes=routes,
        browser=settings.get("browser"),
        private_flag=settings.get("private_flag"),
        timeout_ms=settings.get("timeout_ms"),
        log=settings.get("log"),
    )


def _apply_setting(settings: dict[str, int | str | Path], rest: str) -> None:
    """Parse and apply a 'set' directive. Raises ValueError on invalid setting."""
    if not rest:
        raise ValueError("'set' requires a setting name")

    parts = rest.split(None, 1)
    key = parts[0].lower()
    value = parts[1].strip() if len(parts) > 1 else None
    key_normalized = key.replace("-", "_")

    # Path settings
    if key_normalized in ("browser", "log"):
        if value is None:
            raise ValueError(f"'{key}' requires a path")
        settings[key_normalized] = Path(value).expanduser()

    elif key_normalized == "private_flag":
        if value is None:
            raise ValueError("'private-flag' requires a value")
        if len(value.split()) != 1:
            raise ValueError(f"'private-flag' must be a single token, got '{value}'")
        settings[key_normalized] = value

    # Integer settings
    elif key_normalized == "timeout_ms":
        if value is None:
            raise ValueError("'timeout-ms' requires a number")
        try:
            timeout_ms = int(value)
        except ValueError:
            raise ValueError(f"'timeout-ms' requires a number, got '{value}'") from None
        if timeout_ms <= 0:
            raise ValueError(f"'timeout-ms' must be positive, got {timeout_ms}")
        settings[key_normalized] = timeout_ms

    else:
        raise ValueError(f"unknown setting '{key}'")


# === Patterns ===


def routing_patterns(config: Config) -> list[str]:
    """Return usable routing patterns in load order.

    Blank patterns and patterns that do not compile are dropped (and logged).
    """
    patterns: list[str] = []
    for route in config.routes:
        pattern = route.pattern.strip()
        if not pattern:
            continue
        if not is_valid_pattern(pattern):
            log_event("warning", "pattern_skipped", pattern=pattern, source=route.source)
            continue
        patterns.append(pattern)
    return patterns
