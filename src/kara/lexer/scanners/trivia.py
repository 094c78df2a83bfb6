"""Whitespace and comment skipping mixin."""

from __future__ import annotations

from kara.config import ScanConfig
from kara.lexer.charsets import WHITESPACE


class TriviaScannerMixin:
    """Mixin that consumes input carrying no tokens.

    Whitespace runs and line comments are skipped as a unit, repeatedly,
    until a significant character or the end of input is reached.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _config: ScanConfig

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _advance_to(self, end: int) -> None:
        """Consume everything up to end. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments before the next token."""
        source = self._source
        prefix = self._config.comment_prefix
        while self._pos < self._source_len:
            if source[self._pos] in WHITESPACE:
                self._advance()
            elif source.startswith(prefix, self._pos):
                self._skip_comment()
            else:
                return

    def _skip_comment(self) -> None:
        """Skip a line comment, leaving the newline for whitespace handling."""
        line_end = self._source.find("\n", self._pos)
        self._advance_to(line_end if line_end != -1 else self._source_len)
