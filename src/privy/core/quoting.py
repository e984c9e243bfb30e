"""Command-line quoting for the browser argument string.

Uses Windows-style rules: wrap in double quotes and escape embedded double
quotes with a backslash. Nothing else is escaped, so the result is not safe
to hand to a POSIX shell; POSIX launches go through split_arguments and an
argv list instead.
"""

from __future__ import annotations


def quote_argument(value: str | None) -> str:
    """Quote a string as a single command-line argument.

    Returns "" (two quote characters) for None or empty strings.
    """
    if not value:
        return '""'
    return '"' + value.replace('"', '\\"') + '"'


def split_arguments(text: str) -> list[str]:
    """Split an argument string built with quote_argument back into a list.

    Whitespace outside quotes separates arguments, a "..." group is part of
    one argument, and \\" is a literal quote. Other backslashes are literal.

    A value that ends in a backslash does not survive quote_argument followed
    by split_arguments: the closing quote is read as an escaped one, so
    '"a\\"' comes back as 'a"'.
    """
    args: list[str] = []
    current: list[str] = []
    in_word = False
    in_quotes = False
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c == "\\" and i + 1 < n and text[i + 1] == '"':
            current.append('"')
            in_word = True
            i += 2
            continue
        if c == '"':
            in_quotes = not in_quotes
            in_word = True
        elif c.isspace() and not in_quotes:
            if in_word:
                args.append("".join(current))
                current = []
                in_word = False
        else:
            current.append(c)
            in_word = True
        i += 1
    if in_word:
        args.append("".join(current))
    return args
