"""Comment scanner mixin."""

from __future__ import annotations

from sqlbatch.tokens import Token, TokenType


class CommentScannerMixin:
    """Mixin recognizing -- line comments and /* block comments */.

    Block comments do not nest. Either form may run to end of text.

    """

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

    def _try_scan_line_comment(self, pos: int) -> Token | None:
        """Scan a line comment at pos, including its line break.

        Returns:
            Token if the text at pos is "--", None otherwise.
        """
        if not self._source.startswith("--", pos):
            return None
        idx = self._source.find("\n", pos + 2)
        end = idx + 1 if idx != -1 else self._source_len
        return self._make_token(TokenType.LINE_COMMENT, pos, end)

    def _try_scan_block_comment(self, pos: int) -> Token | None:
        """Scan a block comment at pos, ending at the first */.

        Returns:
            Token if the text at pos is "/*", None otherwise.
        """
        if not self._source.startswith("/*", pos):
            return None
        idx = self._source.find("*/", pos + 2)
        end = idx + 2 if idx != -1 else self._source_len
        return self._make_token(TokenType.BLOCK_COMMENT, pos, end)
