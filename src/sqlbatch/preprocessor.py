"""High-level sqlcmd-style preprocessor.

Splits a script into GO-separated batches while expanding $(name)
variables and running :setvar and :r directives.

Example:
    >>> preprocessor = Preprocessor({"Db": "Sales"})
    >>> list(preprocessor.process("USE $(Db)\\nGO\\nSELECT 1\\n"))
    ['USE Sales\\n', 'SELECT 1\\n']

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from sqlbatch.assembler import BatchAssembler
from sqlbatch.config import PreprocessConfig, get_preprocess_config
from sqlbatch.directives.registry import DirectiveRegistry, create_default_registry
from sqlbatch.loader import FileLoader, TextLoader
from sqlbatch.source import Source
from sqlbatch.utils.logger import get_logger
from sqlbatch.variables import VariableTable

logger = get_logger(__name__)


class Preprocessor:
    """A minimal sqlcmd-style preprocessor.

    Supported features:
        GO          batch separator
        $(name)     variable expansion
        :setvar     set or remove a variable
        :r          include a file

    Variables persist across process() calls on the same instance.

    Thread Safety:
        Not thread-safe. A Preprocessor owns a variable table and a reusable
        batch buffer; use one instance per thread and consume one process()
        result at a time.

    """

    __slots__ = ("_variables", "_config", "_loader", "_registry", "_assembler")

    def __init__(
        self,
        variables: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        *,
        loader: TextLoader | None = None,
        config: PreprocessConfig | None = None,
        directive_registry: DirectiveRegistry | None = None,
    ) -> None:
        """Initialize preprocessor.

        Args:
            variables: Initial variable values
            loader: Reads files named by :r (default: FileLoader)
            config: Configuration (default: the active context config)
            directive_registry: Directive handlers (default: :r and :setvar)
        """
        self._config = config if config is not None else get_preprocess_config()
        self._variables = VariableTable(variables)
        self._loader = loader if loader is not None else FileLoader(encoding=self._config.encoding)
        self._registry = (
            directive_registry if directive_registry is not None else create_default_registry()
        )
        self._assembler = BatchAssembler(
            self._variables, self._registry, self._loader, self._config
        )

    @property
    def variables(self) -> VariableTable:
        """The variables currently defined."""
        return self._variables

    @property
    def config(self) -> PreprocessConfig:
        return self._config

    @property
    def loader(self) -> TextLoader:
        return self._loader

    def process(self, text: str, name: str | None = None) -> Iterator[str]:
        """Preprocess text into batches.

        Args:
            text: The script to preprocess
            name: Logical name of the script, used in error locations
                (default: config.default_name, "(script)")

        Returns:
            Lazy iterator over the non-empty GO-separated batches. Errors in
            the script are raised while the batch containing them is
            assembled.

        Raises:
            TypeError: If text is not a string (raised immediately).
        """
        if not isinstance(text, str):
            msg = f"text must be a str, not {type(text).__name__}"
            raise TypeError(msg)
        if not text:
            return iter(())

        source = Source(name if name is not None else self._config.default_name, text)
        logger.debug("Preprocessing %s (%d chars)", source.name, len(text))
        return self._assembler.batches(source)
