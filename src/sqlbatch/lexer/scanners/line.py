"""Line-start scanner mixin: batch separators and directives.

These tokens are recognized only at offset 0 or right after a \\n, and
consume the line break that ends them.
"""

from __future__ import annotations

from sqlbatch.tokens import Token, TokenType

# Directive names in the order they are tried
DIRECTIVE_NAMES = ("r", "setvar")


class LineScannerMixin:
    """Mixin recognizing GO and :r / :setvar lines."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int

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

    def _find_quoted_end(self, start: int, close: str) -> int:
        """Find end of quoted run. Implemented by Lexer."""
        raise NotImplementedError

    def _line_break_end(self, pos: int) -> int | None:
        """Return the offset after a line break at pos.

        End of text counts as a line break of length zero.

        Returns:
            Offset past \\n or \\r\\n at pos, len(source) at end of text,
            None if pos is followed by anything else.
        """
        if pos >= self._source_len:
            return self._source_len
        if self._source[pos] == "\n":
            return pos + 1
        if self._source.startswith("\r\n", pos):
            return pos + 2
        return None

    def _try_scan_batch_separator(self, pos: int) -> Token | None:
        """Scan a GO line (any letter case, nothing else on the line)."""
        if self._source[pos : pos + 2].lower() != "go":
            return None
        end = self._line_break_end(pos + 2)
        if end is None:
            return None
        return self._make_token(TokenType.BATCH_SEPARATOR, pos, end)

    def _try_scan_directive(self, pos: int) -> Token | None:
        """Scan a :r or :setvar line.

        The argument text runs to the end of the line. A double-quoted run
        inside it may span line breaks and, if unterminated, runs to end of
        text.
        """
        name_start = pos + 1
        for name in DIRECTIVE_NAMES:
            name_end = name_start + len(name)
            if self._source[name_start:name_end].lower() == name:
                break
        else:
            return None

        args_end = self._scan_directive_args(name_end)
        end = self._line_break_end(args_end)
        return self._make_token(
            TokenType.DIRECTIVE,
            pos,
            end if end is not None else args_end,
            name=name,
            args=self._source[name_end:args_end],
        )

    def _scan_directive_args(self, pos: int) -> int:
        """Find where directive arguments starting at pos end."""
        source = self._source
        source_len = self._source_len
        while pos < source_len:
            char = source[pos]
            if char == "\n":
                break
            if char == "\r" and source.startswith("\n", pos + 1):
                break
            if char == '"':
                pos = self._find_quoted_end(pos, '"')
                continue
            pos += 1
        return pos
