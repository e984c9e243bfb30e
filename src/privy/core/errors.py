"""Errors that end a Privy invocation.

Every failure path reports exactly one message to the user and exits 1.
Bad routing patterns are not errors; the matcher skips them.
"""

from __future__ import annotations


class PrivyError(Exception):
    """Base class for user-facing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedUrl(PrivyError):
    """Input is not a parseable absolute URL."""

    def __init__(self, raw: str):
        super().__init__("Invalid URL format provided.")
        self.raw = raw


class UnsupportedScheme(PrivyError):
    """URL parsed, but its scheme is not http or https."""

    def __init__(self, scheme: str):
        super().__init__(
            f"Only HTTP and HTTPS protocols are supported. Received: {scheme}"
        )
        self.scheme = scheme


class BrowserNotFound(PrivyError):
    def __init__(self):
        super().__init__(
            "No browser executable found. Set 'browser' in the Privy config."
        )


class RegistrationFailed(PrivyError):
    def __init__(self, reason: str):
        super().__init__(f"Registration failed: {reason}")
        self.reason = reason


class LaunchFailed(PrivyError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to start browser: {reason}")
        self.reason = reason
