"""
Kara — lexical front end of the Kara language toolchain.

Turns source text into a stream of classified tokens: keywords,
identifiers, numeric and string literals, punctuation, end-of-input,
and in-band lexical errors.

Quick Start:
    >>> from kara import tokenize
    >>> [t.type.name for t in tokenize("let x = 5;")]
    ['LET', 'IDENTIFIER', 'EQUAL', 'INTEGER', 'SEMICOLON', 'EOF']

    >>> # Or pull tokens one at a time
    >>> from kara import Scanner
    >>> scanner = Scanner("flow main {}")
    >>> scanner.next_token()
    Token(FLOW, 'flow', 1:1)
"""

from kara.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from kara.errors import ConfigError, KaraError, LexicalErrors, ScanError
from kara.lexer import Scanner
from kara.location import SourceLocation
from kara.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from kara.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    lineno: int = 1,
    source_file: str | None = None,
    config: ScanConfig | None = None,
    strict: bool = False,
) -> list[Token]:
    """Scan source into a complete token list ending with EOF.

    Args:
        source: Source text
        lineno: Line number of the first line of source
        source_file: Optional source file path for diagnostics
        config: Scan configuration (defaults to the active context config)
        strict: Raise LexicalErrors if any error token was produced

    Returns:
        Every token in order, EOF last.

    Raises:
        LexicalErrors: strict is set and the source has lexical errors.
            Raised only after the whole source has been scanned.

    Example:
        >>> tokenize("a @ b", strict=True)
        Traceback (most recent call last):
        ...
        kara.errors.LexicalErrors: 1 lexical error:
          1:3 illegal character '@'
    """
    scanner = Scanner(source, lineno=lineno, source_file=source_file, config=config)
    tokens = list(scanner.tokenize())
    errors = [token for token in tokens if token.is_error]

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(
            source_length=len(source),
            token_count=len(tokens),
            error_count=len(errors),
        )

    if strict and errors:
        raise LexicalErrors([ScanError.from_token(token) for token in errors])
    return tokens


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Scanner",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "KaraError",
    "ScanError",
    "LexicalErrors",
    "ConfigError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
