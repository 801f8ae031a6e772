"""Source location tracking for error messages.

Provides SourceLocation dataclass for pointing at a position inside one
Source (the top-level script or an included file).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token within a named Source.

    All positions are 1-indexed (lineno and col_offset start at 1);
    offset is the 0-indexed character offset into the Source text.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute character offset in the Source text
        source_file: Name of the Source (script name or include path)

    Examples:
            >>> loc = SourceLocation(3, 1, 42, "deploy.sql")
            >>> str(loc)
            'deploy.sql:3:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.sql:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, text: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line and column for an offset into text.

        Only \\n counts as a line break, so a \\r\\n pair advances one line.

        Args:
            text: Full Source text
            offset: Character offset into text (clamped to its length)
            source_file: Optional Source name

        Returns:
            SourceLocation for offset
        """
        offset = max(0, min(offset, len(text)))
        lineno = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )
