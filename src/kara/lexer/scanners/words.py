"""Identifier and keyword scanning mixin."""

from __future__ import annotations

from kara.lexer.charsets import IDENT_CHARS
from kara.tokens import KEYWORDS, Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier and keyword scanning.

    The full identifier span is scanned first; the keyword table is only
    consulted for the complete spelling, so "lets" never splits into
    "let" + "s".

    """

    _source: str
    _start: int
    _pos: int

    def _advance_while(self, chars: frozenset[str]) -> None:
        """Consume a run of chars. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        literal: int | float | None = None,
    ) -> Token:
        """Create token spanning the current lexeme. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword.

        Returns:
            Keyword token on exact, case-sensitive match; IDENTIFIER otherwise.
        """
        self._advance_while(IDENT_CHARS)
        text = self._source[self._start : self._pos]
        return self._make_token(KEYWORDS.get(text, TokenType.IDENTIFIER), text)
