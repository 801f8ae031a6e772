"""ContextVar-based preprocessor configuration for sqlbatch.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Preprocessor snapshots the active config when it is created, so changing
the context later does not affect preprocessors that already exist.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from sqlbatch.config import PreprocessConfig, preprocess_config_context

    with preprocess_config_context(PreprocessConfig(max_include_depth=8)):
        preprocessor = Preprocessor()

    # Or pass it explicitly
    preprocessor = Preprocessor(config=PreprocessConfig(encoding="cp1252"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_INPUT_NAME = "(script)"


@dataclass(frozen=True, slots=True)
class PreprocessConfig:
    """Immutable preprocessor configuration.

    Attributes:
        default_name: Source name used when process() is given none
        max_include_depth: Maximum number of nested included sources;
            None disables the limit
        encoding: Text encoding used by FileLoader (a leading
            byte order mark is dropped by the default)

    """

    default_name: str = DEFAULT_INPUT_NAME
    max_include_depth: int | None = 64
    encoding: str = "utf-8-sig"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PreprocessConfig":
        """Create PreprocessConfig from dictionary.

        Only includes keys that are valid PreprocessConfig fields; unknown
        keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                PreprocessConfig attribute names.

        Returns:
            New PreprocessConfig instance with values from dict.

        Example:
            >>> config = PreprocessConfig.from_dict({
            ...     "max_include_depth": 4,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_include_depth
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PreprocessConfig = PreprocessConfig()

_preprocess_config: ContextVar[PreprocessConfig] = ContextVar(
    "preprocess_config",
    default=_DEFAULT_CONFIG,
)


def get_preprocess_config() -> PreprocessConfig:
    """Get current preprocessor configuration (thread-local).

    Returns:
        The active PreprocessConfig for this thread/context.

    """
    return _preprocess_config.get()


def set_preprocess_config(config: PreprocessConfig) -> None:
    """Set preprocessor configuration for current context.

    Args:
        config: PreprocessConfig instance to use for this context.

    """
    _preprocess_config.set(config)


def reset_preprocess_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _preprocess_config.set(_DEFAULT_CONFIG)


@contextmanager
def preprocess_config_context(config: PreprocessConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated preprocessing runs.

    Args:
        config: PreprocessConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _preprocess_config.get()
    _preprocess_config.set(config)
    try:
        yield
    finally:
        _preprocess_config.set(previous)


__all__ = [
    "DEFAULT_INPUT_NAME",
    "PreprocessConfig",
    "get_preprocess_config",
    "set_preprocess_config",
    "reset_preprocess_config",
    "preprocess_config_context",
]
