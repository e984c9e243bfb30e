"""Tests for the dispatch engine: launch and register modes."""

import pytest
from conftest import FakeLauncher, FakeRegistrar, FakeUI

from privy.core.errors import UnsupportedScheme

P = "/usr/bin/browser"


class TestLaunch:
    def test_trimmed_url_no_patterns(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher(browser=P)
        assert dispatcher.run(["  https://example.com  "]) == 0
        assert launcher.calls == [(P, '"https://example.com"')]
        assert ui.errors == []

    def test_matching_pattern_adds_private_flag(self, make_dispatcher):
        dispatcher, _, _, launcher, _ = make_dispatcher(patterns=[r"private\.example\.com"])
        assert dispatcher.run(["https://private.example.com"]) == 0
        assert launcher.calls == [(P, '--inprivate "https://private.example.com"')]

    def test_non_matching_pattern(self, make_dispatcher):
        dispatcher, _, _, launcher, _ = make_dispatcher(patterns=[r"bank\.com"])
        assert dispatcher.run(["https://example.com/"]) == 0
        assert launcher.calls == [(P, '"https://example.com/"')]

    def test_custom_private_flag(self, make_dispatcher):
        dispatcher, config, _, launcher, _ = make_dispatcher(patterns=["example"])
        config.private_flag = "--incognito"
        dispatcher.run(["https://example.com"])
        assert launcher.calls == [(P, '--incognito "https://example.com"')]

    def test_quotes_in_url_are_escaped(self, make_dispatcher):
        dispatcher, _, _, launcher, _ = make_dispatcher()
        dispatcher.run(['https://example.com/?q="x"'])
        assert launcher.calls == [(P, '"https://example.com/?q=\\"x\\""')]

    def test_no_url_launches_without_arguments(self, make_dispatcher):
        dispatcher, _, _, launcher, _ = make_dispatcher()
        assert dispatcher.run([]) == 0
        assert launcher.calls == [(P, "")]

    def test_unsupported_scheme(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher()
        assert dispatcher.run(["ftp://example.com"]) == 1
        assert launcher.calls == []
        assert len(ui.errors) == 1
        assert "ftp" in ui.errors[0]

    def test_malformed_url(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher()
        assert dispatcher.run(["not a url"]) == 1
        assert launcher.calls == []
        assert ui.errors == ["Invalid URL format provided."]

    def test_empty_url_argument_is_malformed(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher()
        assert dispatcher.run(["   "]) == 1
        assert launcher.calls == []
        assert ui.errors == ["Invalid URL format provided."]

    def test_browser_not_found(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher(browser=None)
        assert dispatcher.run(["https://example.com"]) == 1
        assert launcher.calls == []
        assert len(ui.errors) == 1
        assert "browser" in ui.errors[0].lower()
        assert ui.errors[0] != "Invalid URL format provided."

    def test_empty_browser_path(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher(browser="")
        assert dispatcher.run([]) == 1
        assert launcher.calls == []

    def test_browser_checked_before_url(self, make_dispatcher):
        dispatcher, _, _, _, ui = make_dispatcher(browser=None)
        dispatcher.run(["ftp://example.com"])
        assert "ftp" not in ui.errors[0]

    def test_launch_failure(self, make_dispatcher):
        launcher = FakeLauncher(error=OSError("permission denied"))
        dispatcher, _, _, _, ui = make_dispatcher(launcher=launcher)
        assert dispatcher.run(["https://example.com"]) == 1
        assert ui.errors == ["Failed to start browser: permission denied"]

    def test_bad_patterns_never_block_launch(self, make_dispatcher):
        dispatcher, _, _, launcher, ui = make_dispatcher(
            patterns=["[invalid", r"(a|aa)+$", r"example\.com"], timeout=0.01
        )
        assert dispatcher.run(["https://example.com/" + "a" * 34 + "!"]) == 0
        assert launcher.calls[0][1].startswith("--inprivate ")
        assert ui.errors == []

    def test_extra_arguments_ignored(self, make_dispatcher):
        dispatcher, _, _, launcher, _ = make_dispatcher()
        assert dispatcher.run(["https://example.com", "--silent"]) == 0
        assert launcher.calls == [(P, '"https://example.com"')]


class TestBuildArguments:
    def test_none(self, make_dispatcher):
        dispatcher, *_ = make_dispatcher()
        assert dispatcher.build_arguments(None) == ""

    def test_patterns_not_loaded_for_invalid_url(self, make_dispatcher):
        dispatcher, config, *_ = make_dispatcher()
        loaded = []
        config.routing_patterns = lambda: loaded.append(True) or []
        with pytest.raises(UnsupportedScheme):
            dispatcher.build_arguments("mailto:a@b.c")
        assert loaded == []


class TestRegister:
    def test_register_prompts_and_opens_settings(self, make_dispatcher):
        ui = FakeUI(answer=True)
        dispatcher, _, registrar, launcher, _ = make_dispatcher(ui=ui)
        assert dispatcher.run(["--register"]) == 0
        assert registrar.registered
        assert len(ui.prompts) == 1
        assert registrar.opened
        assert launcher.calls == []

    def test_register_declined_prompt(self, make_dispatcher):
        dispatcher, _, registrar, _, ui = make_dispatcher(ui=FakeUI(answer=False))
        assert dispatcher.run(["--register"]) == 0
        assert registrar.registered
        assert not registrar.opened

    def test_register_silent(self, make_dispatcher):
        dispatcher, _, registrar, _, ui = make_dispatcher()
        assert dispatcher.run(["--register", "--silent"]) == 0
        assert registrar.registered
        assert ui.prompts == []

    def test_register_failure(self, make_dispatcher):
        registrar = FakeRegistrar(error=PermissionError("access denied"))
        dispatcher, _, _, _, ui = make_dispatcher(registrar=registrar)
        assert dispatcher.run(["--register"]) == 1
        assert ui.errors == ["Registration failed: access denied"]
        assert ui.prompts == []

    def test_register_does_not_need_browser(self, make_dispatcher):
        dispatcher, _, registrar, _, ui = make_dispatcher(browser=None)
        assert dispatcher.run(["--register", "--silent"]) == 0
        assert ui.errors == []

    def test_open_settings_failure_still_succeeds(self, make_dispatcher):
        registrar = FakeRegistrar(open_error=OSError("no settings app"))
        dispatcher, _, _, _, ui = make_dispatcher(registrar=registrar, ui=FakeUI(answer=True))
        assert dispatcher.run(["--register"]) == 0
        assert ui.errors == ["Unable to open Default apps settings: no settings app"]
