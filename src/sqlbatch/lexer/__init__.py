"""Token scanner for sqlcmd-style SQL scripts.

This package provides a hand-written, forward-only scanner. It recognizes
quoting, comments, variable references and line-initial GO / directives,
and leaves everything else as inert text.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + dispatch)
├── charsets.py          # Character classification sets
└── scanners/            # One mixin per token family
    ├── quoted.py        # 'string' and [identifier]
    ├── comment.py       # -- and /* */
    ├── variable.py      # $(name)
    └── line.py          # GO, :r, :setvar

Usage:
    >>> from sqlbatch.lexer import Lexer
    >>> lexer = Lexer("SELECT '$(x)'\\nGO\\n")
    >>> [t.type.name for t in lexer.tokenize()]
    ['STRING', 'BATCH_SEPARATOR']

"""

from sqlbatch.lexer.core import Lexer

__all__ = ["Lexer"]
