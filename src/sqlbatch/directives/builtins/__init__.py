"""Built-in directive handlers."""

from sqlbatch.directives.builtins.include import IncludeDirective
from sqlbatch.directives.builtins.setvar import SetVarDirective

__all__ = ["IncludeDirective", "SetVarDirective"]
