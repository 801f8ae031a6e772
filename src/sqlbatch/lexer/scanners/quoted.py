"""Quoted string and quoted identifier scanner mixin."""

from __future__ import annotations

from sqlbatch.tokens import Token, TokenType


def find_quoted_end(text: str, start: int, close: str) -> int:
    """Find the end of a quoted run that opens at start.

    A doubled close character is an escaped literal and does not end the
    run. An unterminated run ends at end of text.

    Args:
        text: Source text
        start: Position of the opening delimiter
        close: Closing delimiter character

    Returns:
        Offset just past the closing delimiter, or len(text).
    """
    pos = start + 1
    while True:
        idx = text.find(close, pos)
        if idx == -1:
            return len(text)
        if text.startswith(close, idx + 1):
            pos = idx + 2
            continue
        return idx + 1


class QuotedScannerMixin:
    """Mixin recognizing 'strings' and [quoted identifiers].

    Both forms escape their closing delimiter by doubling it ('' and ]]).
    Unterminated forms run to end of text; that is not an error.

    """

    # These will be set by the Lexer class
    _source: str

    def _make_token(
        self,
        token_type: TokenType,
        start: int,
        end: int,
        *,
        name: str | None = None,
        args: str = "",
        terminated: bool = True,
    ) -> Token:
        """Create token for source[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self, pos: int) -> Token:
        """Scan a single-quoted string starting at pos."""
        end = find_quoted_end(self._source, pos, "'")
        return self._make_token(TokenType.STRING, pos, end)

    def _scan_quoted_identifier(self, pos: int) -> Token:
        """Scan a bracket-quoted identifier starting at pos."""
        end = find_quoted_end(self._source, pos, "]")
        return self._make_token(TokenType.QUOTED_IDENTIFIER, pos, end)
