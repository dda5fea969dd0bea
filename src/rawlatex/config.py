"""ContextVar-based configuration for the math plugin.

The active MathConfig is read once, when ``math_plugin`` registers its rules
on a MarkdownIt instance. Rules and render functions close over that config,
so changing the context afterwards never affects an already configured parser.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed.

Usage:
    from markdown_it import MarkdownIt
    from rawlatex import MathConfig, math_config_context, math_plugin

    # Explicit config
    md = MarkdownIt().use(math_plugin, config=MathConfig(block_enabled=False))

    # Or scoped defaults for everything configured inside the block
    with math_config_context(MathConfig(strip_backticks=False)):
        md = MarkdownIt().use(math_plugin)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class MathConfig:
    """Immutable math plugin configuration.

    Attributes:
        inline_enabled: Register the ``$...$`` inline rule
        inline_block_enabled: Register the ``$$...$$`` mid-paragraph rule
        block_enabled: Register the ``$$`` block rule
        strip_backticks: Strip one back-tick layer from inline math on render
        html_guard: Decline ``$`` directly after an unclosed inline HTML tag

    """

    inline_enabled: bool = True
    inline_block_enabled: bool = True
    block_enabled: bool = True
    strip_backticks: bool = True
    html_guard: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MathConfig":
        """Create MathConfig from dictionary.

        Only includes keys that are valid MathConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = MathConfig.from_dict({
            ...     "block_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.block_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MathConfig = MathConfig()

_math_config: ContextVar[MathConfig] = ContextVar(
    "math_config",
    default=_DEFAULT_CONFIG,
)


def get_math_config() -> MathConfig:
    """Get the math configuration for the current context."""
    return _math_config.get()


def set_math_config(config: MathConfig) -> None:
    """Set math configuration for current context.

    Only affects the current thread's context.
    """
    _math_config.set(config)


def reset_math_config() -> None:
    """Reset to the default configuration."""
    _math_config.set(_DEFAULT_CONFIG)


@contextmanager
def math_config_context(config: MathConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: MathConfig to use within the context.

    Example:
        >>> with math_config_context(MathConfig(block_enabled=False)):
        ...     md = create_markdown()
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _math_config.get()
    _math_config.set(config)
    try:
        yield
    finally:
        _math_config.set(previous)


__all__ = [
    "MathConfig",
    "get_math_config",
    "math_config_context",
    "reset_math_config",
    "set_math_config",
]
