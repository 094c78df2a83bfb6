"""String and numeric literal scanning mixin."""

from __future__ import annotations

import math

from kara.config import ScanConfig
from kara.lexer.charsets import DECIMAL_POINT, DIGITS, QUOTE
from kara.tokens import Token, TokenType


class LiteralScannerMixin:
    """Mixin providing string and number scanning.

    Malformed input never raises here: an unclosed string or a number that
    does not fit its type becomes an error token covering the span, and the
    cursor still moves past it.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _start: int
    _pos: int
    _config: ScanConfig

    def _peek_next(self) -> str:
        """Character after the current one. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _advance_to(self, end: int) -> None:
        """Consume everything up to end. Implemented by Scanner."""
        raise NotImplementedError

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

    def _scan_string(self) -> Token:
        """Scan a double-quoted string literal.

        No escape processing: a backslash is an ordinary character.
        Newlines inside the literal are counted.

        Returns:
            STRING token with the quotes stripped, or UNTERMINATED_STRING
            carrying the text from the opening quote to end of input.
        """
        self._advance()  # opening quote
        content_start = self._pos
        close = self._source.find(QUOTE, content_start)
        if close == -1:
            self._advance_to(self._source_len)
            return self._make_token(
                TokenType.UNTERMINATED_STRING,
                self._source[self._start : self._pos],
            )

        self._advance_to(close)
        self._advance()  # closing quote
        return self._make_token(TokenType.STRING, self._source[content_start:close])

    def _scan_number(self) -> Token:
        """Scan an integer or float literal.

        A "." only belongs to the number when a digit follows it, so "42."
        scans as INTEGER 42 and leaves the "." for the next token.

        Returns:
            INTEGER or FLOAT token with its parsed literal, or
            MALFORMED_NUMBER when the value is out of range.
        """
        self._advance_while(DIGITS)
        is_float = False
        if self._source.startswith(DECIMAL_POINT, self._pos) and self._peek_next() in DIGITS:
            self._advance()
            self._advance_while(DIGITS)
            is_float = True

        text = self._source[self._start : self._pos]
        if is_float:
            literal = self._parse_float(text)
            token_type = TokenType.FLOAT
        else:
            literal = self._parse_integer(text)
            token_type = TokenType.INTEGER

        if literal is None:
            return self._make_token(TokenType.MALFORMED_NUMBER, text)
        return self._make_token(token_type, text, literal=literal)

    def _parse_integer(self, text: str) -> int | None:
        try:
            value = int(text)
        except ValueError:
            # Digit count above sys.get_int_max_str_digits()
            return None
        if value > self._config.max_integer:
            return None
        return value

    def _parse_float(self, text: str) -> float | None:
        try:
            value = float(text)
        except ValueError:
            return None
        if math.isinf(value):
            return None
        return value
