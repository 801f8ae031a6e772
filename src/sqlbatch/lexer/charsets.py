"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sqlbatch.lexer.charsets import TOKEN_START_CHARS

    if char in TOKEN_START_CHARS:  # O(1) lookup
        ...
"""

# Characters that may begin a token anywhere on a line:
# ' string, [ quoted identifier, -- line comment, /* block comment, $( variable
TOKEN_START_CHARS: frozenset[str] = frozenset("'[-/$")

# Characters that may begin a token only at the start of a line:
# GO batch separator, :r and :setvar directives
LINE_START_CHARS: frozenset[str] = frozenset("gG:")

# ASCII punctuation allowed in variable names besides letters and digits
NAME_PUNCTUATION: frozenset[str] = frozenset("_-")


def is_name_char(char: str) -> bool:
    """Check if char may appear in a variable name.

    Letters and digits from any script, underscore, and hyphen.

    """
    return char.isalnum() or char in NAME_PUNCTUATION
