"""The :r directive: continue scanning in another file.

Syntax:
    :r path/to/file.sql
    :r "path with blanks/$(Env).sql"   -- variables expand in the path

The included text is spliced in place: the batch in progress continues
into it, and back out of it when it ends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from sqlbatch.directives.arguments import parse_include_args, unquote
from sqlbatch.errors import ErrorKind, PreprocessError
from sqlbatch.utils.logger import get_logger

if TYPE_CHECKING:
    from sqlbatch.directives.protocol import DirectiveContext

logger = get_logger(__name__)


class IncludeDirective:
    """Handler for :r."""

    names: ClassVar[tuple[str, ...]] = ("r",)

    def execute(self, args: str, context: DirectiveContext) -> None:
        raw_path = parse_include_args(args)
        if raw_path is None:
            raise PreprocessError("Invalid syntax in :r directive.", ErrorKind.INCLUDE_SYNTAX)

        path = context.variables.expand(unquote(raw_path))

        max_depth = context.config.max_include_depth
        if max_depth is not None and context.inputs.depth >= max_depth:
            raise PreprocessError(
                f"Maximum include depth of {max_depth} exceeded.",
                ErrorKind.INCLUDE_DEPTH,
            )

        try:
            text = context.loader.load(path)
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise PreprocessError(
                f"Cannot read included file '{path}': {reason}",
                ErrorKind.INCLUDE_IO,
            ) from exc

        context.inputs.push(path, text)
        logger.debug("Including %s (depth %d)", path, context.inputs.depth)
