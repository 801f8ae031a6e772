"""Single-pass token scanner for sqlcmd-style scripts.

Scans forward from the current position for the earliest of seven token
forms and treats everything between tokens as inert text. Tokens are
produced on demand; position only moves forward.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from sqlbatch.lexer.charsets import LINE_START_CHARS, TOKEN_START_CHARS
from sqlbatch.lexer.scanners import (
    CommentScannerMixin,
    LineScannerMixin,
    QuotedScannerMixin,
    VariableScannerMixin,
)
from sqlbatch.lexer.scanners.quoted import find_quoted_end
from sqlbatch.tokens import Token, TokenType


class Lexer(
    QuotedScannerMixin,
    CommentScannerMixin,
    VariableScannerMixin,
    LineScannerMixin,
):
    """Forward-only scanner producing one Token at a time.

    At each position the character found there selects at most one
    scanner, so the earliest match always wins. GO and directives are
    tried only at the start of a line.

    Usage:
            >>> lexer = Lexer("SELECT 1 -- one\\nGO\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(LINE_COMMENT, '-- one\\n', 9:16)
        Token(BATCH_SEPARATOR, 'GO\\n', 16:19)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Script text
            source_file: Optional name of the script for diagnostics
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    @property
    def source(self) -> str:
        """The text being scanned."""
        return self._source

    @property
    def source_file(self) -> str | None:
        """The name given for the text, if any."""
        return self._source_file

    @property
    def position(self) -> int:
        """Offset where the next scan starts."""
        return self._pos

    @property
    def exhausted(self) -> bool:
        """True once no further token can be produced."""
        return self._pos >= self._source_len

    def tokenize(self) -> Iterator[Token]:
        """Tokenize remaining source into a token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Find the next token at or after the current position.

        Advances the position past the token, or to end of text when no
        token remains.

        Returns:
            The next Token, or None at end of text.
        """
        source = self._source
        source_len = self._source_len
        pos = self._pos

        while pos < source_len:
            char = source[pos]
            if char in TOKEN_START_CHARS:
                token = self._dispatch_char(char, pos)
            elif char in LINE_START_CHARS and (pos == 0 or source[pos - 1] == "\n"):
                token = self._dispatch_line_start(char, pos)
            else:
                pos += 1
                continue

            if token is not None:
                self._pos = token.end
                return token
            pos += 1

        self._pos = source_len
        return None

    def _dispatch_char(self, char: str, pos: int) -> Token | None:
        """Try the scanner selected by a token start character."""
        if char == "'":
            return self._scan_string(pos)
        if char == "[":
            return self._scan_quoted_identifier(pos)
        if char == "-":
            return self._try_scan_line_comment(pos)
        if char == "/":
            return self._try_scan_block_comment(pos)
        return self._try_scan_variable(pos)

    def _dispatch_line_start(self, char: str, pos: int) -> Token | None:
        """Try the scanner selected by a line start character."""
        if char == ":":
            return self._try_scan_directive(pos)
        return self._try_scan_batch_separator(pos)

    def _find_quoted_end(self, start: int, close: str) -> int:
        return find_quoted_end(self._source, start, close)

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
        """Create a Token for source[start:end].

        Args:
            token_type: The token type.
            start: Start offset in source.
            end: End offset in source (exclusive).
            name: Variable or directive name.
            args: Raw directive argument text.
            terminated: Whether a variable reference is closed.

        Returns:
            Token with its raw text.
        """
        return Token(
            token_type,
            self._source[start:end],
            start,
            end,
            name=name,
            args=args,
            terminated=terminated,
        )
