"""Handler registration for freedesktop.org desktops (Linux, BSD)."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from privy.core.quoting import quote_argument

DESKTOP_FILE_NAME = "privy.desktop"
SCHEMES = ("http", "https")


def data_home() -> Path:
    """Return $XDG_DATA_HOME, defaulting to ~/.local/share."""
    value = os.environ.get("XDG_DATA_HOME")
    if value:
        return Path(value)
    return Path.home() / ".local" / "share"


def desktop_entry(command_path: str) -> str:
    mime_types = "".join(f"x-scheme-handler/{s};" for s in SCHEMES)
    return (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Privy\n"
        "Comment=Opens matching links in private browsing mode\n"
        f"Exec={quote_argument(command_path)} %u\n"
        "Terminal=false\n"
        "NoDisplay=true\n"
        "Categories=Network;WebBrowser;\n"
        f"MimeType={mime_types}\n"
    )


class FreedesktopRegistrar:
    """Installs privy.desktop and makes it the default http/https handler."""

    def __init__(self, command_path: str):
        self.command_path = command_path

    def register(self) -> None:
        apps_dir = data_home() / "applications"
        apps_dir.mkdir(parents=True, exist_ok=True)
        (apps_dir / DESKTOP_FILE_NAME).write_text(
            desktop_entry(self.command_path), encoding="utf-8"
        )
        for scheme in SCHEMES:
            subprocess.run(
                ["xdg-mime", "default", DESKTOP_FILE_NAME, f"x-scheme-handler/{scheme}"],
                check=True,
                capture_output=True,
            )

    def open_default_apps(self) -> None:
        # xdg-mime already made Privy the default; there is no settings page to open
        pass
