"""Loaders that supply the text of files named by :r directives.

A loader turns a path into text and signals failure with OSError. The
batch assembler turns that into a PreprocessError located at the
directive.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextLoader(Protocol):
    """Protocol for objects that read included files."""

    def load(self, path: str) -> str:
        """Return the full text named by path.

        Raises:
            OSError: If the text cannot be read.
        """
        ...


class FileLoader:
    """Read included files from the file system.

    Line breaks are returned exactly as stored (no newline translation),
    so batches keep the file's own EOL sequences.

    """

    __slots__ = ("_encoding", "_base_dir")

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        base_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        """Initialize file loader.

        Args:
            encoding: Text encoding of included files
            base_dir: Directory for relative paths (None = working directory)
        """
        self._encoding = encoding
        self._base_dir = Path(base_dir) if base_dir is not None else None

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def base_dir(self) -> Path | None:
        return self._base_dir

    def resolve(self, path: str) -> Path:
        """Map a directive path to a file system path."""
        file_path = Path(path)
        if self._base_dir is not None and not file_path.is_absolute():
            file_path = self._base_dir / file_path
        return file_path

    def load(self, path: str) -> str:
        with self.resolve(path).open(encoding=self._encoding, newline="") as f:
            return f.read()


class MappingLoader:
    """Serve included files from an in-memory mapping of path to text."""

    __slots__ = ("_files",)

    def __init__(self, files: Mapping[str, str]) -> None:
        self._files = dict(files)

    def load(self, path: str) -> str:
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from None
