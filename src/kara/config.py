"""ContextVar-based scan configuration for Kara.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner captures the active config when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from kara.config import ScanConfig, scan_config_context
    from kara.tokens import SINGLE_CHAR_TOKENS

    # Treat a lone "-" as illegal (only "->" is valid)
    no_minus = ScanConfig(single_char_tokens=frozenset(SINGLE_CHAR_TOKENS) - {"-"})
    with scan_config_context(no_minus):
        tokens = tokenize("a -> b - c")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from kara.errors import ConfigError
from kara.tokens import SINGLE_CHAR_TOKENS


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        single_char_tokens: Single-character symbols that form tokens on
            their own. Any symbol left out scans as ILLEGAL unless it starts
            a two-character operator.
        comment_prefix: Introducer of a comment running to end of line
        integer_bits: Width of the signed integer type INTEGER literals
            must fit in; wider values scan as MALFORMED_NUMBER

    """

    single_char_tokens: frozenset[str] = field(
        default_factory=lambda: frozenset(SINGLE_CHAR_TOKENS)
    )
    comment_prefix: str = "//"
    integer_bits: int = 64

    def __post_init__(self) -> None:
        unknown = set(self.single_char_tokens).difference(SINGLE_CHAR_TOKENS)
        if unknown:
            raise ConfigError(
                f"unknown single-character tokens: {', '.join(sorted(unknown))}"
            )
        if not self.comment_prefix:
            raise ConfigError("comment_prefix must not be empty")
        if any(char.isspace() for char in self.comment_prefix):
            raise ConfigError(f"comment_prefix must not contain whitespace: {self.comment_prefix!r}")
        if self.integer_bits < 2:
            raise ConfigError(f"integer_bits must be at least 2, got {self.integer_bits}")

    @property
    def max_integer(self) -> int:
        return (1 << (self.integer_bits - 1)) - 1

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. single_char_tokens may be any iterable of
        strings (a list from JSON or YAML, a string of symbols).

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "comment_prefix": "#",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comment_prefix
            '#'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "single_char_tokens" in filtered:
            filtered["single_char_tokens"] = frozenset(filtered["single_char_tokens"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
