"""Variable reference scanner mixin."""

from __future__ import annotations

from typing import NamedTuple

from sqlbatch.lexer.charsets import is_name_char
from sqlbatch.tokens import Token, TokenType


class VariableReference(NamedTuple):
    """A $(name) reference found in text."""

    name: str
    start: int
    end: int
    terminated: bool


def scan_variable_reference(text: str, pos: int) -> VariableReference | None:
    """Recognize a variable reference starting at pos.

    A reference is "$(" followed by one or more name characters. When the
    next character is ")" the reference is terminated and includes it;
    otherwise the reference ends after the name and is unterminated.

    Args:
        text: Text to scan
        pos: Position of the "$"

    Returns:
        VariableReference, or None if "$(" is absent or has no name.
    """
    if not text.startswith("$(", pos):
        return None

    name_start = pos + 2
    name_end = name_start
    text_len = len(text)
    while name_end < text_len and is_name_char(text[name_end]):
        name_end += 1

    if name_end == name_start:
        return None

    name = text[name_start:name_end]
    if name_end < text_len and text[name_end] == ")":
        return VariableReference(name, pos, name_end + 1, True)
    return VariableReference(name, pos, name_end, False)


def has_variable_reference(text: str) -> bool:
    """Check if text contains a terminated $(name) reference."""
    pos = text.find("$(")
    while pos != -1:
        ref = scan_variable_reference(text, pos)
        if ref is not None and ref.terminated:
            return True
        pos = text.find("$(", pos + 2)
    return False


class VariableScannerMixin:
    """Mixin recognizing $(name) variable references in plain text."""

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

    def _try_scan_variable(self, pos: int) -> Token | None:
        """Scan a variable reference at pos.

        Unterminated references still produce a token (terminated=False);
        the batch assembler reports them when the batch is built.
        """
        ref = scan_variable_reference(self._source, pos)
        if ref is None:
            return None
        return self._make_token(
            TokenType.VARIABLE,
            pos,
            ref.end,
            name=ref.name,
            terminated=ref.terminated,
        )
