"""ContextVar-based lexer configuration for markuplex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config at construction unless one is passed in.

Thread Safety:
    Each thread has independent ContextVar storage, so no locks are needed.

Usage:
    from markuplex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(debug=True)):
        result = Lexer(source).tokenize()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Note: source_file is intentionally excluded, it's per-call state,
    not configuration. It remains on the Lexer instance.

    Attributes:
        context_radius: Characters of source kept on each side of a
            diagnostic site in ``Diagnostic.context``
        recovery_context_radius: Radius used for MALFORMED_TAG and
            UNCLOSED_TAG diagnostics
        debug: Re-raise scanner contract violations instead of recovering
        collect_whitespace_text: Emit TEXT tokens for whitespace-only runs

    """

    context_radius: int = 10
    recovery_context_radius: int = 20
    debug: bool = False
    collect_whitespace_text: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexerConfig.from_dict({"debug": True, "unknown": 1})
            >>> config.debug
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get the active lexer configuration for this context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the module-level default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(context_radius=40)):
        ...     result = Lexer("<p>").tokenize()
        >>> # Automatically reset to previous config

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
