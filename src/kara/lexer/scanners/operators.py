"""Punctuation and operator scanning mixin."""

from __future__ import annotations

from kara.config import ScanConfig
from kara.tokens import SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, Token, TokenType


class OperatorScannerMixin:
    """Mixin providing punctuation scanning.

    Two-character operators are matched by looking at the following
    character without consuming it. Otherwise exactly one character is
    consumed, as a single-character token if the active config enables it
    or as ILLEGAL.

    """

    _source: str
    _start: int
    _pos: int
    _config: ScanConfig

    def _peek_next(self) -> str:
        """Character after the current one. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
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

    def _scan_operator(self) -> Token:
        """Scan punctuation, or report the current character as illegal."""
        char = self._source[self._pos]

        follow = TWO_CHAR_TOKENS.get(char)
        if follow is not None:
            token_type = follow.get(self._peek_next())
            if token_type is not None:
                self._advance()
                self._advance()
                return self._make_token(token_type, self._source[self._start : self._pos])

        self._advance()
        if char in self._config.single_char_tokens:
            return self._make_token(SINGLE_CHAR_TOKENS[char], char)
        return self._make_token(TokenType.ILLEGAL, char)
