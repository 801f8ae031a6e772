"""Exception classes for sqlbatch.

Every failure found while preprocessing a script is a PreprocessError.
The ErrorKind attached to it tells callers which rule was broken without
parsing the message text.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlbatch.location import SourceLocation


class ErrorKind(Enum):
    """Causes of a PreprocessError."""

    UNDEFINED_VARIABLE = auto()  # $(name) with no value
    UNTERMINATED_VARIABLE = auto()  # $(name without )
    SETVAR_SYNTAX = auto()  # malformed :setvar arguments
    INCLUDE_SYNTAX = auto()  # malformed :r arguments
    UNTERMINATED_STRING = auto()  # "value without closing quote
    INCLUDE_IO = auto()  # loader failed to read an included file
    INCLUDE_DEPTH = auto()  # too many nested :r directives


class SqlBatchError(Exception):
    """Base exception for all sqlbatch errors.

    Subclass this for specific error categories.
    """

    pass


class PreprocessError(SqlBatchError):
    """Error in the usage of a preprocessor feature.

    Raised while assembling the batch that contains the offending token;
    the first error aborts the run.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize preprocess error with optional location.

        Args:
            message: Error description
            kind: Which preprocessing rule was violated
            location: Where the offending token starts (optional)
        """
        self.message = message
        self.kind = kind
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")

    @property
    def source_file(self) -> str | None:
        """Name of the Source that contains the error, if known."""
        return self.location.source_file if self.location else None

    @property
    def lineno(self) -> int | None:
        """Line number of the error (1-indexed), if known."""
        return self.location.lineno if self.location else None

    def with_location(self, location: SourceLocation) -> PreprocessError:
        """Return a copy of this error pointing at location."""
        return PreprocessError(self.message, self.kind, location)


def undefined_variable(name: str, location: SourceLocation | None = None) -> PreprocessError:
    return PreprocessError(
        f"SqlCmd variable '{name}' is not defined.",
        ErrorKind.UNDEFINED_VARIABLE,
        location,
    )


def unterminated_variable(name: str, location: SourceLocation | None = None) -> PreprocessError:
    return PreprocessError(
        f"Unterminated reference to SqlCmd variable '{name}'.",
        ErrorKind.UNTERMINATED_VARIABLE,
        location,
    )


def unterminated_string() -> PreprocessError:
    return PreprocessError("Unterminated double-quoted string.", ErrorKind.UNTERMINATED_STRING)
