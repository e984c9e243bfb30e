"""
Dispatch engine for Privy.

Decides what to do with one invocation: register Privy as the URL handler,
or validate a URL, pick private or normal mode from the routing patterns,
and launch the browser. All platform access goes through the capability
interfaces below so the engine itself stays platform independent.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from privy.core.errors import BrowserNotFound, LaunchFailed, PrivyError, RegistrationFailed
from privy.core.log import log_decision, log_event
from privy.core.patterns import DEFAULT_TIMEOUT, first_match
from privy.core.quoting import quote_argument
from privy.core.urls import validate_url

REGISTER_FLAG = "--register"
SILENT_FLAG = "--silent"

DEFAULT_APPS_PROMPT = (
    "Privy is registered. Do you want to open Default apps settings now "
    "so you can select it as the default browser?"
)


class ConfigSource(Protocol):
    """Where the browser path and routing patterns come from."""

    private_flag: str

    def browser_path(self) -> str | None: ...

    def routing_patterns(self) -> Sequence[str]: ...


class Registrar(Protocol):
    """Registers Privy as the operating system's http/https handler."""

    def register(self) -> None: ...

    def open_default_apps(self) -> None: ...


class Launcher(Protocol):
    def launch(self, executable: str, arguments: str) -> None: ...


class UserInterface(Protocol):
    def show_error(self, message: str) -> None: ...

    def prompt_yes_no(self, message: str) -> bool: ...


class Dispatcher:
    """Runs one Privy invocation against injected collaborators."""

    def __init__(
        self,
        config: ConfigSource,
        registrar: Registrar,
        launcher: Launcher,
        ui: UserInterface,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config = config
        self.registrar = registrar
        self.launcher = launcher
        self.ui = ui
        self.timeout = timeout

    def run(self, argv: Sequence[str]) -> int:
        """Execute based on command-line arguments. Returns the exit code."""
        if argv and argv[0] == REGISTER_FLAG:
            silent = len(argv) > 1 and argv[1] == SILENT_FLAG
            return self._register(silent)
        return self._launch(argv[0] if argv else None)

    def _register(self, silent: bool) -> int:
        try:
            self.registrar.register()
        except Exception as e:
            return self._fail(RegistrationFailed(str(e)))

        log_event("info", "registered", silent=silent)
        if silent:
            return 0

        if self.ui.prompt_yes_no(DEFAULT_APPS_PROMPT):
            try:
                self.registrar.open_default_apps()
            except Exception as e:
                # Registration already succeeded
                self.ui.show_error(f"Unable to open Default apps settings: {e}")
        return 0

    def _launch(self, url: str | None) -> int:
        executable = self.config.browser_path()
        if not executable:
            return self._fail(BrowserNotFound())

        try:
            arguments = self.build_arguments(url)
        except PrivyError as e:
            return self._fail(e)

        try:
            self.launcher.launch(executable, arguments)
        except Exception as e:
            return self._fail(LaunchFailed(str(e)))

        return 0

    def build_arguments(self, url: str | None) -> str:
        """Build the browser argument string for url.

        Returns "" when no URL was given. Raises MalformedUrl or
        UnsupportedScheme for a URL that may not be opened.
        """
        if url is None:
            return ""

        url = url.strip()
        try:
            validate_url(url)
        except PrivyError:
            log_decision("rejected", url)
            raise

        pattern = first_match(url, self.config.routing_patterns(), self.timeout)
        quoted = quote_argument(url)
        if pattern is None:
            log_decision("normal", url)
            return quoted
        log_decision("private", url, pattern=pattern)
        return f"{self.config.private_flag} {quoted}"

    def _fail(self, error: PrivyError) -> int:
        log_event("error", "failed", error=type(error).__name__, message=error.message)
        self.ui.show_error(error.message)
        return 1
