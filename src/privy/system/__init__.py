"""
Platform collaborators for Privy.

The dispatch engine only sees the capability interfaces in
privy.core.dispatch; this package provides the real implementations
for Windows and freedesktop (Linux/BSD) systems.
"""

from __future__ import annotations

import sys

from privy.core.dispatch import Registrar


class UnsupportedRegistrar:
    """Registrar for platforms without a supported handler mechanism."""

    def __init__(self, platform: str):
        self.platform = platform

    def register(self) -> None:
        raise RuntimeError(f"URL handler registration is not supported on {self.platform}")

    def open_default_apps(self) -> None:
        pass


def get_registrar(command_path: str, platform: str | None = None) -> Registrar:
    """Return the registrar for the running platform."""
    platform = platform or sys.platform
    if platform == "win32":
        from privy.system.windows import WindowsRegistrar

        return WindowsRegistrar(command_path)
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        from privy.system.freedesktop import FreedesktopRegistrar

        return FreedesktopRegistrar(command_path)
    return UnsupportedRegistrar(platform)
