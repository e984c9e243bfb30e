"""Locate the browser executable Privy hands links to."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

# Looked up on PATH when nothing is configured
BROWSER_CANDIDATES = ("microsoft-edge", "microsoft-edge-stable", "msedge")


def find_browser(configured: Path | None, platform: str | None = None) -> str | None:
    """Return the browser to launch, or None if there is none.

    A configured path wins but must exist. Otherwise Windows asks the
    registry for Edge, and every platform falls back to PATH.
    """
    if configured is not None:
        return str(configured) if configured.is_file() else None

    if (platform or sys.platform) == "win32":
        from privy.system.windows import edge_path

        path = edge_path()
        if path:
            return path

    for name in BROWSER_CANDIDATES:
        found = shutil.which(name)
        if found:
            return found
    return None
