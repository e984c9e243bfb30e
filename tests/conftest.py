"""
Shared test fixtures for Privy tests.
"""

from __future__ import annotations

import pytest

from privy.core.config import Config
from privy.core.dispatch import Dispatcher
from privy.core.log import configure_logging


class FakeConfig:
    """ConfigSource with a fixed browser path and pattern list."""

    def __init__(self, browser: str | None = "/usr/bin/browser", patterns=(), private_flag="--inprivate"):
        self.browser = browser
        self.patterns = list(patterns)
        self.private_flag = private_flag

    def browser_path(self) -> str | None:
        return self.browser

    def routing_patterns(self) -> list[str]:
        return self.patterns


class FakeRegistrar:
    def __init__(self, error: Exception | None = None, open_error: Exception | None = None):
        self.error = error
        self.open_error = open_error
        self.registered = False
        self.opened = False

    def register(self) -> None:
        if self.error is not None:
            raise self.error
        self.registered = True

    def open_default_apps(self) -> None:
        if self.open_error is not None:
            raise self.open_error
        self.opened = True


class FakeLauncher:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def launch(self, executable: str, arguments: str) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((executable, arguments))


class FakeUI:
    def __init__(self, answer: bool = False):
        self.answer = answer
        self.errors: list[str] = []
        self.prompts: list[str] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def prompt_yes_no(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer


@pytest.fixture(autouse=True)
def no_logging():
    """Keep structlog output out of test runs unless a test enables it."""
    configure_logging(Config())
    yield
    configure_logging(Config())


@pytest.fixture
def make_dispatcher():
    """Factory returning (dispatcher, config, registrar, launcher, ui)."""

    def _make(
        browser: str | None = "/usr/bin/browser",
        patterns=(),
        registrar: FakeRegistrar | None = None,
        launcher: FakeLauncher | None = None,
        ui: FakeUI | None = None,
        timeout: float = 0.1,
    ):
        config = FakeConfig(browser, patterns)
        registrar = registrar or FakeRegistrar()
        launcher = launcher or FakeLauncher()
        ui = ui or FakeUI()
        dispatcher = Dispatcher(config, registrar, launcher, ui, timeout=timeout)
        return dispatcher, config, registrar, launcher, ui

    return _make
