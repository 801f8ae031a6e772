"""Directive system for sqlbatch.

Directives are lines that start with a colon command. Two are supported:

:setvar name value      assign (or, without value, remove) a variable
:r path                 include another file in place

Key components:
- DirectiveHandler: Protocol for directive implementations
- DirectiveContext: State handlers may change
- DirectiveRegistry: Handler lookup and registration
- unquote: Double-quoted argument unescaping
"""

from __future__ import annotations

from sqlbatch.directives.arguments import (
    parse_include_args,
    parse_setvar_args,
    unquote,
)
from sqlbatch.directives.builtins import IncludeDirective, SetVarDirective
from sqlbatch.directives.protocol import DirectiveContext, DirectiveHandler
from sqlbatch.directives.registry import (
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "DirectiveContext",
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "IncludeDirective",
    "SetVarDirective",
    "create_default_registry",
    "create_registry_with_defaults",
    "parse_include_args",
    "parse_setvar_args",
    "unquote",
]
