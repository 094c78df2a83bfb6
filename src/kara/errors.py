"""Exception classes for Kara.

The scanner reports lexical errors in-band as error tokens and never raises
for them. These exceptions exist for drivers that choose to stop on errors,
and for invalid configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kara.tokens import Token


class KaraError(Exception):
    """Base exception for all Kara errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(KaraError):
    """A single lexical diagnostic.

    Built from an error token by a driver that wants exception semantics.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_token(cls, token: Token) -> ScanError:
        """Create a ScanError describing an error token."""
        return cls(
            token.message,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.location.source_file,
        )


class LexicalErrors(KaraError):
    """Every lexical error found in one complete scan.

    Raised by kara.tokenize(strict=True) after the whole stream is produced,
    so all independent problems are reported together.
    """

    def __init__(self, errors: list[ScanError]) -> None:
        self.errors = errors
        count = len(errors)
        noun = "error" if count == 1 else "errors"
        lines = "\n".join(f"  {err}" for err in errors)
        super().__init__(f"{count} lexical {noun}:\n{lines}")


class ConfigError(KaraError):
    """Invalid scanner configuration."""

    pass
