"""Token and TokenType definitions for the sqlbatch lexer.

The lexer produces Token objects one at a time; the batch assembler consumes
each one immediately and never retains it. Text between two tokens is inert
and is never tokenized.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Quoted
    STRING = auto()  # 'text'
    QUOTED_IDENTIFIER = auto()  # [name]

    # Comments
    LINE_COMMENT = auto()  # -- text
    BLOCK_COMMENT = auto()  # /* text */

    # Preprocessor
    VARIABLE = auto()  # $(name)
    BATCH_SEPARATOR = auto()  # GO
    DIRECTIVE = auto()  # :r path, :setvar name value


COMMENT_TYPES = frozenset({TokenType.LINE_COMMENT, TokenType.BLOCK_COMMENT})
QUOTED_TYPES = frozenset({TokenType.STRING, TokenType.QUOTED_IDENTIFIER})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw matched text, including delimiters and any line break
            consumed by the token
        start: Absolute start offset in the Source text
        end: Absolute end offset in the Source text (exclusive)
        name: Variable name for VARIABLE; lowercased directive name
            ("r" or "setvar") for DIRECTIVE; None otherwise
        args: Raw argument text for DIRECTIVE, without the line break
        terminated: False for a VARIABLE missing its closing parenthesis

    """

    type: TokenType
    value: str
    start: int
    end: int
    name: str | None = None
    args: str = ""
    terminated: bool = True

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start}:{self.end})"
