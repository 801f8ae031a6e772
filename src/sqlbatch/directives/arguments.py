"""Argument grammars for the :r and :setvar directives.

The lexer hands each directive its raw argument text (everything after
the directive name up to the end of the line). These patterns validate
that text and pick out the path, or the variable name and value.

Both grammars accept a value either unquoted (no blanks or double quotes)
or double-quoted with "" standing for a literal quote, followed by
optional blanks and an optional -- comment.
"""

from __future__ import annotations

import re

from sqlbatch.errors import unterminated_string

# Unquoted value, or double-quoted value that may run to end of text
_VALUE = r"""
    [^"\ \t\r\n]+
    | " (?: [^"] | "" )* (?: " | \Z )
"""

INCLUDE_ARGS_PATTERN = re.compile(
    rf"""
    \A [\ \t]+
    (?P<path> {_VALUE} )
    [\ \t]* (?: --.* )? \Z
    """,
    re.VERBOSE,
)

# Atomic value group: once a value is taken it is never shortened, but the
# whole group may still be skipped (":setvar name -- comment" unsets name).
SETVAR_ARGS_PATTERN = re.compile(
    rf"""
    \A [\ \t]+
    (?P<name> [^\W\d] [\w-]* )
    (?> [\ \t]+ (?P<value> {_VALUE} ) )?
    [\ \t]* (?: --.* )? \Z
    """,
    re.VERBOSE,
)

_QUOTED_VALUE = re.compile(r'"(?P<body>(?:[^"]|"")*)"')


def unquote(value: str) -> str:
    """Remove double quotes from a directive value.

    Values that do not start with a double quote are returned unchanged.
    Inside quotes, "" becomes ".

    Args:
        value: Raw value text

    Returns:
        The unquoted value

    Raises:
        PreprocessError: If the value opens a quote it never closes.

    Example:
        >>> unquote('"a""b"')
        'a"b'
    """
    if not value or value[0] != '"':
        return value

    match = _QUOTED_VALUE.fullmatch(value)
    if match is None:
        raise unterminated_string()

    return match["body"].replace('""', '"')


def parse_include_args(args: str) -> str | None:
    """Return the raw (still quoted) path of a :r directive, or None if malformed."""
    match = INCLUDE_ARGS_PATTERN.match(args)
    if match is None:
        return None
    return match["path"]


def parse_setvar_args(args: str) -> tuple[str, str] | None:
    """Return (name, raw value) of a :setvar directive, or None if malformed.

    The raw value is "" when the directive has no value.
    """
    match = SETVAR_ARGS_PATTERN.match(args)
    if match is None:
        return None
    return match["name"], match["value"] or ""
