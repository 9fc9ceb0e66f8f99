"""ContextVar-based reader configuration for pullxml.

Config is captured by each Reader when it is opened, so changing the
active config later does not affect readers already in use.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from pullxml.config import ReaderConfig, reader_config_context

    with reader_config_context(ReaderConfig(strict_accessors=True)):
        reader = open_reader("<a>text</a>")
        reader.comment_text()  # raises EventMismatchError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Immutable reader configuration.

    Attributes:
        strict_accessors: Raise EventMismatchError when a typed accessor is
            called under the wrong event. When False, a warning is logged
            and the accessor returns None.
        log_events: Emit a DEBUG log record for every classified event.

    """

    strict_accessors: bool = False
    log_events: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ReaderConfig":
        """Create ReaderConfig from dictionary.

        Only includes keys that are valid ReaderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ReaderConfig attribute names.

        Returns:
            New ReaderConfig instance with values from dict.

        Example:
            >>> config = ReaderConfig.from_dict({
            ...     "strict_accessors": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_accessors
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReaderConfig = ReaderConfig()

_reader_config: ContextVar[ReaderConfig] = ContextVar(
    "reader_config",
    default=_DEFAULT_CONFIG,
)


def get_reader_config() -> ReaderConfig:
    """Get current reader configuration (thread-local)."""
    return _reader_config.get()


def set_reader_config(config: ReaderConfig) -> None:
    """Set reader configuration for current context.

    Args:
        config: ReaderConfig instance to use for this context.

    """
    _reader_config.set(config)


def reset_reader_config() -> None:
    """Reset to the module-level default configuration."""
    _reader_config.set(_DEFAULT_CONFIG)


@contextmanager
def reader_config_context(config: ReaderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ReaderConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _reader_config.get()
    _reader_config.set(config)
    try:
        yield
    finally:
        _reader_config.set(previous)


__all__ = [
    "ReaderConfig",
    "get_reader_config",
    "set_reader_config",
    "reset_reader_config",
    "reader_config_context",
]
