"""Text sources and the input stack used for nested file inclusion.

A Source is one text buffer (the caller's script or an included file)
with its own scan position. Including a file pushes a new Source whose
parent is the including one; when an included Source runs out of text,
it is popped and scanning resumes in the parent where it left off.
"""

from __future__ import annotations

from collections.abc import Iterator

from sqlbatch.lexer import Lexer
from sqlbatch.location import SourceLocation
from sqlbatch.tokens import Token


class Source:
    """A named text buffer with a forward-only scan cursor.

    Attributes:
        name: Diagnostic label (script name or include path)
        text: Full text; never modified
        parent: The including Source, or None for the top-level script

    """

    __slots__ = ("name", "text", "parent", "_lexer")

    def __init__(self, name: str, text: str, parent: Source | None = None) -> None:
        if name is None:
            raise TypeError("Source name must not be None")
        if text is None:
            raise TypeError("Source text must not be None")
        self.name = name
        self.text = text
        self.parent = parent
        self._lexer = Lexer(text, source_file=name)

    def __repr__(self) -> str:
        return f"Source({self.name!r}, index={self.index}, length={self.length})"

    @property
    def index(self) -> int:
        """Offset where the next token scan starts."""
        return self._lexer.position

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for the top-level script)."""
        depth = 0
        parent = self.parent
        while parent is not None:
            depth += 1
            parent = parent.parent
        return depth

    def next_token(self) -> Token | None:
        """Scan the next token and move the cursor past it."""
        return self._lexer.next_token()

    def location_at(self, offset: int) -> SourceLocation:
        """Location of offset within this Source, for error messages."""
        return SourceLocation.from_offset(self.text, offset, self.name)


class InputStack:
    """Stack of Sources, innermost inclusion on top.

    The bottom Source is the top-level script and is never popped.

    Usage:
        >>> stack = InputStack(Source("(script)", "a\\n:r b.sql\\nc"))
        >>> stack.push("b.sql", "included").name
        'b.sql'
        >>> stack.depth
        1
        >>> stack.pop().name
        'b.sql'

    """

    __slots__ = ("_sources",)

    def __init__(self, root: Source) -> None:
        self._sources: list[Source] = [root]

    @property
    def top(self) -> Source:
        """The Source currently being scanned."""
        return self._sources[-1]

    @property
    def root(self) -> Source:
        """The top-level script Source."""
        return self._sources[0]

    @property
    def depth(self) -> int:
        """Number of included Sources on the stack."""
        return len(self._sources) - 1

    @property
    def at_root(self) -> bool:
        """True when the top-level script is being scanned."""
        return len(self._sources) == 1

    def push(self, name: str, text: str) -> Source:
        """Push a new Source included by the current top.

        Returns:
            The new top Source
        """
        source = Source(name, text, parent=self.top)
        self._sources.append(source)
        return source

    def pop(self) -> Source:
        """Remove the exhausted top Source and return it.

        Raises:
            IndexError: If only the top-level script remains.
        """
        if self.at_root:
            raise IndexError("cannot pop the top-level source")
        return self._sources.pop()

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[Source]:
        """Iterate from the innermost Source outward."""
        return reversed(self._sources)
