"""Batch assembler: turns a token stream into GO-separated batches.

Implements a two-mode state machine per batch:

VERBATIM
    Nothing in the batch so far needed rewriting, so the batch is still
    an exact slice of one Source's text. Comments, quoted spans without
    variable references and plain text just move the scan forward.

BUFFERED
    Some token needed new text (a variable, a quoted span containing one,
    a directive) or the batch crossed the end of an included Source. From
    then on every fragment is copied into a reusable StringBuilder.

A batch ends at a GO line or at the end of the top-level script. The end
of an included Source does not end the batch; scanning resumes in the
including Source right after the :r line.

Thread Safety:
BatchAssembler instances belong to one Preprocessor and must not be used
by two runs at once.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from typing import TYPE_CHECKING

from sqlbatch.directives.protocol import DirectiveContext
from sqlbatch.errors import PreprocessError, unterminated_variable
from sqlbatch.lexer.scanners.variable import has_variable_reference
from sqlbatch.source import InputStack, Source
from sqlbatch.stringbuilder import StringBuilder
from sqlbatch.tokens import COMMENT_TYPES, QUOTED_TYPES, Token, TokenType
from sqlbatch.utils.logger import get_logger

if TYPE_CHECKING:
    from sqlbatch.config import PreprocessConfig
    from sqlbatch.directives.registry import DirectiveRegistry
    from sqlbatch.loader import TextLoader
    from sqlbatch.variables import VariableTable

logger = get_logger(__name__)


class BatchMode(Enum):
    """How the batch in progress is being accumulated."""

    VERBATIM = auto()  # Batch is a slice of one Source
    BUFFERED = auto()  # Batch is being copied into the builder


class BatchAssembler:
    """Pulls tokens from the input stack and assembles batches.

    Usage:
        >>> assembler = BatchAssembler(VariableTable(), registry, loader, config)
        >>> list(assembler.batches(Source("(script)", "a\\nGO\\nb")))
        ['a\\n', 'b']

    """

    __slots__ = (
        "_variables",
        "_registry",
        "_loader",
        "_config",
        "_builder",  # Reused across batches
        "_mode",  # Mode of the most recently assembled batch
    )

    def __init__(
        self,
        variables: VariableTable,
        registry: DirectiveRegistry,
        loader: TextLoader,
        config: PreprocessConfig,
    ) -> None:
        self._variables = variables
        self._registry = registry
        self._loader = loader
        self._config = config
        self._builder = StringBuilder()
        self._mode = BatchMode.VERBATIM

    @property
    def mode(self) -> BatchMode:
        """Mode used for the most recently assembled batch."""
        return self._mode

    def batches(self, root: Source) -> Iterator[str]:
        """Yield the non-empty batches of root and the files it includes.

        Lazy and single-pass: each batch is assembled when requested.

        Raises:
            PreprocessError: When the batch being assembled contains an error.
        """
        inputs = InputStack(root)
        count = 0
        done = False

        while not done:
            batch, done = self._next_batch(inputs)
            if batch:
                count += 1
                logger.debug(
                    "Batch %d: %d chars (%s)", count, len(batch), self._mode.name.lower()
                )
                yield batch

    # =========================================================================
    # VERBATIM mode
    # =========================================================================

    def _next_batch(self, inputs: InputStack) -> tuple[str, bool]:
        """Assemble one batch, reusing the source text if possible.

        Returns:
            (batch, done) where done is True once the top-level script ends.
        """
        self._mode = BatchMode.VERBATIM
        source = inputs.top
        start = source.index

        while True:
            token = source.next_token()

            if token is None:
                # End of top-level script => final batch
                if inputs.at_root:
                    return source.text[start:], True

                # Batch has content and continues in the parent
                if start != source.length:
                    return self._build_batch(inputs, start, None)

                # Nothing accumulated yet; resume in the parent
                self._pop(inputs)
                source = inputs.top
                start = source.index
                continue

            token_type = token.type

            if token_type in COMMENT_TYPES:
                continue

            if token_type in QUOTED_TYPES:
                if has_variable_reference(token.value):
                    return self._build_batch(inputs, start, token)
                continue

            if token_type is TokenType.BATCH_SEPARATOR:
                return source.text[start : token.start], False

            # Variable or directive
            return self._build_batch(inputs, start, token)

    # =========================================================================
    # BUFFERED mode
    # =========================================================================

    def _build_batch(
        self, inputs: InputStack, start: int, token: Token | None
    ) -> tuple[str, bool]:
        """Finish the batch in the builder, starting from a pending token.

        Args:
            inputs: Input stack; its top is the Source that produced token
            start: Offset in the top Source where the batch began
            token: First token needing a rewrite, or None at end of Source

        Returns:
            (batch, done) as for _next_batch
        """
        self._mode = BatchMode.BUFFERED
        builder = self._builder.clear()
        source = inputs.top

        while True:
            if token is None:
                builder.append_range(source.text, start)

                if inputs.at_root:
                    return builder.build(), True

                # Batch continues in the parent
                self._pop(inputs)
                source = inputs.top
                start = source.index
                token = source.next_token()
                continue

            builder.append_range(source.text, start, token.start)

            if token.type is TokenType.BATCH_SEPARATOR:
                return builder.build(), False

            try:
                self._append_token(token, inputs)
            except PreprocessError as exc:
                if exc.location is not None:
                    raise
                raise exc.with_location(source.location_at(token.start)) from exc.__cause__

            # A :r directive may have pushed a new Source
            source = inputs.top
            start = source.index
            token = source.next_token()

    def _append_token(self, token: Token, inputs: InputStack) -> None:
        """Append the output for one token, or run its directive."""
        token_type = token.type

        if token_type in COMMENT_TYPES:
            self._builder.append(token.value)
        elif token_type in QUOTED_TYPES:
            self._builder.append(self._variables.expand(token.value))
        elif token_type is TokenType.VARIABLE:
            self._builder.append(self._resolve(token))
        else:
            self._execute_directive(token, inputs)

    def _resolve(self, token: Token) -> str:
        name = token.name or ""
        if not token.terminated:
            raise unterminated_variable(name)
        return self._variables.resolve(name)

    def _execute_directive(self, token: Token, inputs: InputStack) -> None:
        handler = self._registry.get(token.name or "")
        if handler is None:
            # Unregistered directives are plain text
            self._builder.append(token.value)
            return

        context = DirectiveContext(
            variables=self._variables,
            inputs=inputs,
            loader=self._loader,
            config=self._config,
        )
        handler.execute(token.args, context)

    def _pop(self, inputs: InputStack) -> None:
        source = inputs.pop()
        logger.debug("Finished %s", source.name)
