"""Windows registry access: handler registration and Edge lookup.

Registration is per user (HKCU) and follows the RegisteredApplications
scheme, so Privy shows up in Settings > Apps > Default apps.
"""

from __future__ import annotations

import os
import subprocess
import winreg

from privy.core.quoting import quote_argument

PROG_ID = "Privy"
APP_REG_ROOT = r"Software\Privy"
CAPABILITIES_KEY = APP_REG_ROOT + r"\Capabilities"
EDGE_APP_PATH_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths\msedge.exe"
DEFAULT_APPS_URI = "ms-settings:defaultapps"


def _set_values(root, path: str, values: dict[str, str]) -> None:
    with winreg.CreateKey(root, path) as key:
        for name, value in values.items():
            winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)


class WindowsRegistrar:
    """Registers Privy as the per-user http/https handler."""

    def __init__(self, command_path: str):
        self.command_path = command_path

    def register(self) -> None:
        exe = self.command_path
        hkcu = winreg.HKEY_CURRENT_USER

        # ProgId (protocol handler)
        _set_values(hkcu, rf"Software\Classes\{PROG_ID}", {
            "": f"URL:{PROG_ID} Protocol",
            "URL Protocol": "",
        })
        _set_values(hkcu, rf"Software\Classes\{PROG_ID}\DefaultIcon", {
            "": f"{quote_argument(exe)},1",
        })
        _set_values(hkcu, rf"Software\Classes\{PROG_ID}\shell\open\command", {
            "": f'{quote_argument(exe)} "%1"',
        })

        # Capabilities and the schemes they claim
        _set_values(hkcu, CAPABILITIES_KEY, {
            "ApplicationName": PROG_ID,
            "ApplicationDescription": "Handles web links and opens matching URLs in private mode",
        })
        _set_values(hkcu, CAPABILITIES_KEY + r"\URLAssociations", {
            "http": PROG_ID,
            "https": PROG_ID,
        })

        # Tell Windows where to find the Capabilities
        _set_values(hkcu, r"Software\RegisteredApplications", {
            PROG_ID: CAPABILITIES_KEY,
        })

    def open_default_apps(self) -> None:
        try:
            os.startfile(DEFAULT_APPS_URI)
        except OSError:
            subprocess.Popen(["control.exe", "/name", "Microsoft.DefaultPrograms"])


def edge_path() -> str | None:
    """Return the msedge.exe path from App Paths, if it exists on disk.

    Only existence is checked. The file's version resource is not read, so
    its product name is not confirmed to be Microsoft Edge.
    """
    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, EDGE_APP_PATH_KEY) as key:
            value, _ = winreg.QueryValueEx(key, "")
    except OSError:
        return None
    if isinstance(value, str) and value and os.path.isfile(value):
        return value
    return None
