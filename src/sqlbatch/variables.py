"""Case-insensitive sqlcmd variable table.

Names compare with str.casefold(), so "Foo", "FOO" and "foo" are one
variable. Assigning an empty value removes the variable: an empty
variable and an undefined one are the same thing.

Example:
    >>> table = VariableTable({"DbName": "Sales"})
    >>> table["dbname"]
    'Sales'
    >>> table.expand("USE [$(DBNAME)]")
    'USE [Sales]'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping

from sqlbatch.errors import undefined_variable
from sqlbatch.lexer.scanners.variable import scan_variable_reference
from sqlbatch.stringbuilder import StringBuilder
from sqlbatch.utils.logger import get_logger

logger = get_logger(__name__)


class VariableTable(MutableMapping[str, str]):
    """Mapping of variable name to value, keyed case-insensitively.

    Iteration yields names in the spelling most recently assigned.

    Thread Safety:
        Not thread-safe. A table belongs to one Preprocessor.

    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        initial: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            initial: Optional name/value pairs; empty values are skipped
        """
        # casefolded name -> (name as assigned, value)
        self._entries: dict[str, tuple[str, str]] = {}
        if initial is not None:
            self.update(initial)

    def __getitem__(self, name: str) -> str:
        return self._entries[name.casefold()][1]

    def __setitem__(self, name: str, value: str) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        del self._entries[name.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._entries

    def __repr__(self) -> str:
        return f"VariableTable({dict(self.items())!r})"

    def set(self, name: str, value: str | None) -> None:
        """Assign value to name, or remove name if value is empty.

        Args:
            name: Variable name (any letter case)
            value: New value; None or "" removes the variable
        """
        key = name.casefold()
        if not value:
            if self._entries.pop(key, None) is not None:
                logger.debug("Removed variable %s", name)
            return
        self._entries[key] = (name, value)
        logger.debug("Set variable %s", name)

    def resolve(self, name: str) -> str:
        """Look up the value of a referenced variable.

        Raises:
            PreprocessError: If name is not defined.
        """
        entry = self._entries.get(name.casefold())
        if entry is None:
            raise undefined_variable(name)
        return entry[1]

    def expand(self, text: str) -> str:
        """Replace every complete $(name) reference in text.

        Incomplete references (no closing parenthesis) are left as they
        are; only the scanner treats those as errors.

        Raises:
            PreprocessError: If a referenced variable is not defined.
        """
        pos = text.find("$(")
        if pos == -1:
            return text

        sb = StringBuilder()
        start = 0
        while pos != -1:
            ref = scan_variable_reference(text, pos)
            if ref is None or not ref.terminated:
                pos = text.find("$(", pos + 2)
                continue
            sb.append_range(text, start, ref.start)
            sb.append(self.resolve(ref.name))
            start = ref.end
            pos = text.find("$(", start)

        sb.append_range(text, start)
        return sb.build()
