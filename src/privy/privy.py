"""Privy entry point: the operating system's http/https handler.

Usage:
    privy [URL]                   open URL (or just the browser)
    privy --register [--silent]   register Privy as the URL handler
    privy --version

Links matching a `private <regex>` line in ~/.privy/config (or the file
named by $PRIVY_CONFIG) open with the browser's private-mode flag,
--inprivate unless `set private-flag` says otherwise. Every other link
opens normally.

Exit codes:
- 0: Browser launched, or registration done.
- 1: Anything failed. One message is printed to stderr.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from privy import __version__
from privy.core.config import load_config
from privy.core.dispatch import Dispatcher
from privy.core.log import configure_logging
from privy.system import get_registrar
from privy.system.console import ConsoleUI
from privy.system.launcher import ProcessLauncher
from privy.system.settings import FileConfigSource


def build_dispatcher() -> Dispatcher:
    """Wire the dispatch engine to the real config, platform and console."""
    config = load_config()
    configure_logging(config)
    return Dispatcher(
        config=FileConfigSource(config),
        registrar=get_registrar(os.path.abspath(sys.argv[0])),
        launcher=ProcessLauncher(),
        ui=ConsoleUI(),
        timeout=config.timeout,
    )


def main(argv: Sequence[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] == "--version":
        print(f"privy {__version__}")
        sys.exit(0)
    sys.exit(build_dispatcher().run(argv))


if __name__ == "__main__":
    main()
