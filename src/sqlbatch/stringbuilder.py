"""StringBuilder for O(n) batch accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The batch assembler keeps one builder per
preprocessing run and clears it between batches instead of allocating a
new one.

Thread Safety:
StringBuilder instances belong to one Preprocessor.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("SELECT ")
            >>> sb.append_range("x = 'abc'", 4, 9)
            >>> sb.build()
            "SELECT 'abc'"
        
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_range(self, s: str, start: int, end: int | None = None) -> StringBuilder:
        """Append s[start:end] to the builder.

        Args:
            s: Source string
            start: Start offset
            end: End offset (None = end of s)

        Returns:
            self for method chaining
        """
        if end is None:
            end = len(s)
        if start < end:
            self._parts.append(s[start:end])
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
