"""Token scanners for the sqlbatch lexer.

Each scanner is a mixin that recognizes one family of tokens at a given
position. The Lexer decides which scanner to try from the character found
there; a scanner returns None when the text at that position is inert.
"""

from __future__ import annotations

from sqlbatch.lexer.scanners.comment import CommentScannerMixin
from sqlbatch.lexer.scanners.line import LineScannerMixin
from sqlbatch.lexer.scanners.quoted import QuotedScannerMixin
from sqlbatch.lexer.scanners.variable import (
    VariableReference,
    VariableScannerMixin,
    scan_variable_reference,
)

__all__ = [
    "CommentScannerMixin",
    "LineScannerMixin",
    "QuotedScannerMixin",
    "VariableReference",
    "VariableScannerMixin",
    "scan_variable_reference",
]
