"""Config-file backed source of the browser path and routing patterns."""

from __future__ import annotations

from collections.abc import Sequence

from privy.core.config import Config, routing_patterns
from privy.system.browser import find_browser


class FileConfigSource:
    def __init__(self, config: Config):
        self.config = config
        self.private_flag = config.resolved_private_flag

    def browser_path(self) -> str | None:
        return find_browser(self.config.browser)

    def routing_patterns(self) -> Sequence[str]:
        return routing_patterns(self.config)
