"""The :setvar directive: assign or remove a variable.

Syntax:
    :setvar name value
    :setvar name "quoted ""value"" that may span lines"
    :setvar name            -- removes name

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from sqlbatch.directives.arguments import parse_setvar_args, unquote
from sqlbatch.errors import ErrorKind, PreprocessError

if TYPE_CHECKING:
    from sqlbatch.directives.protocol import DirectiveContext


class SetVarDirective:
    """Handler for :setvar.

    The variable table is changed only after the whole argument has been
    validated and unquoted.
    """

    names: ClassVar[tuple[str, ...]] = ("setvar",)

    def execute(self, args: str, context: DirectiveContext) -> None:
        parsed = parse_setvar_args(args)
        if parsed is None:
            raise PreprocessError("Invalid syntax in :setvar directive.", ErrorKind.SETVAR_SYNTAX)

        name, value = parsed
        context.variables.set(name, unquote(value))
