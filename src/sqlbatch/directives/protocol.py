"""DirectiveHandler protocol for line-initial preprocessor directives.

A handler receives the raw argument text of its directive and a
DirectiveContext giving access to the state it may change: the variable
table and the input stack.

The lexer recognizes only :r and :setvar lines. A registry may swap in
another handler for either name, or leave a name out so that its lines
stay in the batch as plain text.

Thread Safety:
Handlers must be stateless. All state lives in the DirectiveContext,
which belongs to one preprocessing run.

Example:
    >>> class LoggedSetVarDirective(SetVarDirective):
    ...     def execute(self, args, context):
    ...         print("setvar", args.strip())
    ...         super().execute(args, context)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlbatch.config import PreprocessConfig
    from sqlbatch.loader import TextLoader
    from sqlbatch.source import InputStack
    from sqlbatch.variables import VariableTable


@dataclass(frozen=True, slots=True)
class DirectiveContext:
    """State a directive may read or change.

    Attributes:
        variables: Variable table of the running Preprocessor
        inputs: Input stack of the batch being assembled
        loader: Loader for included files
        config: Active preprocessor configuration

    """

    variables: VariableTable
    inputs: InputStack
    loader: TextLoader
    config: PreprocessConfig


@runtime_checkable
class DirectiveHandler(Protocol):
    """Protocol for directive implementations.

    Attributes:
        names: Lowercase directive names this handler responds to
            (without the leading colon).

    """

    names: ClassVar[tuple[str, ...]]

    def execute(self, args: str, context: DirectiveContext) -> None:
        """Carry out the directive.

        Args:
            args: Raw argument text following the directive name
            context: Mutable preprocessing state

        Raises:
            PreprocessError: If args are malformed or the directive fails.
        """
        ...
