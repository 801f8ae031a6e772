"""
sqlbatch: sqlcmd-style preprocessing for SQL scripts

Splits a script into GO-separated batches, expands $(name) variables,
and runs the :setvar and :r directives. It is a lexical preprocessor,
not a SQL parser: quoting and comments are recognized only so that
directives and separators inside them are left alone.

Quick Start:
    >>> from sqlbatch import process
    >>> list(process("CREATE TABLE t (x int)\\nGO\\nINSERT t VALUES (1)\\n"))
    ['CREATE TABLE t (x int)\\n', 'INSERT t VALUES (1)\\n']

    >>> # Variables and includes
    >>> from sqlbatch import Preprocessor
    >>> pp = Preprocessor({"Schema": "dbo"})
    >>> for batch in pp.process(":setvar Table orders\\nSELECT * FROM $(Schema).$(Table)"):
    ...     print(batch)
    SELECT * FROM dbo.orders

Installation:
    pip install sqlbatch              # zero runtime dependencies
"""

from collections.abc import Iterable, Iterator, Mapping

from sqlbatch.assembler import BatchAssembler, BatchMode
from sqlbatch.config import (
    PreprocessConfig,
    get_preprocess_config,
    preprocess_config_context,
    reset_preprocess_config,
    set_preprocess_config,
)
from sqlbatch.directives import (
    DirectiveContext,
    DirectiveHandler,
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
    unquote,
)
from sqlbatch.errors import ErrorKind, PreprocessError, SqlBatchError
from sqlbatch.lexer import Lexer
from sqlbatch.loader import FileLoader, MappingLoader, TextLoader
from sqlbatch.location import SourceLocation
from sqlbatch.preprocessor import Preprocessor
from sqlbatch.source import InputStack, Source
from sqlbatch.tokens import Token, TokenType
from sqlbatch.variables import VariableTable

__version__ = "0.1.0"


def process(
    text: str,
    name: str | None = None,
    *,
    variables: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    loader: TextLoader | None = None,
) -> Iterator[str]:
    """Preprocess text into batches with a new Preprocessor.

    Args:
        text: The script to preprocess
        name: Logical name of the script for error locations
        variables: Initial variable values
        loader: Reads files named by :r (default: FileLoader)

    Returns:
        Lazy iterator over the non-empty batches

    Example:
        >>> list(process("SELECT '$(x)'", variables={"x": "1"}))
        ["SELECT '1'"]
    """
    return Preprocessor(variables, loader=loader).process(text, name)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "process",
    "Preprocessor",
    "VariableTable",
    # Loaders
    "TextLoader",
    "FileLoader",
    "MappingLoader",
    # Directive extensibility
    "DirectiveContext",
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "unquote",
    # Internals exposed for tooling
    "BatchAssembler",
    "BatchMode",
    "InputStack",
    "Lexer",
    "Source",
    "Token",
    "TokenType",
    # Errors
    "SqlBatchError",
    "PreprocessError",
    "ErrorKind",
    "SourceLocation",
    # Configuration (ContextVar-based)
    "PreprocessConfig",
    "get_preprocess_config",
    "set_preprocess_config",
    "reset_preprocess_config",
    "preprocess_config_context",
]
