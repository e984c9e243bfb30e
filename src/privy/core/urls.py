"""URL validation for links handed to Privy by the operating system."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from privy.core.errors import MalformedUrl, UnsupportedScheme

SUPPORTED_SCHEMES = frozenset({"http", "https"})

# Characters that can never appear in a host name
_HOST_FORBIDDEN = frozenset(' "<>\\^`{|}')


@dataclass(frozen=True)
class ParsedUrl:
    """A validated http/https URL."""

    scheme: str
    netloc: str
    hostname: str
    port: int | None
    path: str
    query: str
    fragment: str
    url: str
    """Normalized form: scheme lowercased by the parser, host case preserved."""


def validate_url(raw: str) -> ParsedUrl:
    """Parse raw as an absolute http or https URL.

    The caller is expected to have trimmed the input already.

    Raises MalformedUrl when raw has no scheme or a broken structure
    (bad port, bad IPv6 literal, missing host), and UnsupportedScheme
    when it parses but uses any scheme other than http/https.
    """
    if not raw:
        raise MalformedUrl(raw)

    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError:
        raise MalformedUrl(raw) from None

    if not parts.scheme:
        raise MalformedUrl(raw)

    # urlsplit lowercases the scheme token
    if parts.scheme not in SUPPORTED_SCHEMES:
        raise UnsupportedScheme(parts.scheme)

    hostname = parts.hostname
    if not hostname or not _is_valid_host(hostname):
        raise MalformedUrl(raw)

    return ParsedUrl(
        scheme=parts.scheme,
        netloc=parts.netloc,
        hostname=hostname,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        url=urlunsplit(parts),
    )


def _is_valid_host(hostname: str) -> bool:
    for c in hostname:
        if c in _HOST_FORBIDDEN or c.isspace() or ord(c) < 32 or ord(c) == 127:
            return False
    return True
