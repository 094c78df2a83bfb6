"""Pull-based scanner for Kara source text.

Each next_token() call skips insignificant input, marks the token start,
dispatches on the first significant character, and returns exactly one
token. Every branch consumes at least one character or reports EOF, so
scanning a finite buffer always terminates.

Lexical errors are returned as tokens, never raised, so one pass can
surface several independent problems.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from kara.config import ScanConfig, get_scan_config
from kara.lexer.charsets import DIGITS, IDENT_START, QUOTE
from kara.lexer.scanners import (
    LiteralScannerMixin,
    OperatorScannerMixin,
    TriviaScannerMixin,
    WordScannerMixin,
)
from kara.tokens import Token, TokenType
from kara.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    TriviaScannerMixin,
    WordScannerMixin,
    LiteralScannerMixin,
    OperatorScannerMixin,
):
    """Scanner producing tokens on demand.

    Usage:
            >>> scanner = Scanner("let x = 5;")
            >>> scanner.next_token()
            Token(LET, 'let', 1:1)
            >>> [t.type.name for t in scanner]
            ['IDENTIFIER', 'EQUAL', 'INTEGER', 'SEMICOLON', 'EOF']

    Once EOF has been returned, further next_token() calls keep returning
    EOF at the same position.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_start",  # Offset where the current token begins
        "_pos",
        "_lineno",
        "_col",
        "_start_lineno",
        "_start_col",
        "_source_file",
        "_config",
    )

    def __init__(
        self,
        source: str,
        *,
        lineno: int = 1,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner over source text.

        Args:
            source: Complete source text
            lineno: Line number of the first line of source
            source_file: Optional source file path for diagnostics
            config: Scan configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._pos = 0
        self._lineno = lineno
        self._col = 1
        self._start_lineno = lineno
        self._start_col = 1
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns:
            The next token; EOF once the input is exhausted.
        """
        self._skip_trivia()
        self._mark_start()

        if self._pos >= self._source_len:
            return self._make_token(TokenType.EOF, "")

        char = self._source[self._pos]
        if char == QUOTE:
            token = self._scan_string()
        elif char in DIGITS:
            token = self._scan_number()
        elif char in IDENT_START:
            token = self._scan_word()
        else:
            token = self._scan_operator()

        if token.type.is_error:
            logger.debug("%s at %s", token.message, token.location)
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek_next(self) -> str:
        """Peek at the character after the current one.

        Returns:
            That character or empty string past end of input.
        """
        pos = self._pos + 1
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _advance_while(self, chars: frozenset[str]) -> None:
        """Advance over a maximal run of chars.

        Callers only pass sets without "\\n", so only the column moves.
        """
        source = self._source
        pos = self._pos
        source_len = self._source_len
        while pos < source_len and source[pos] in chars:
            pos += 1
        self._col += pos - self._pos
        self._pos = pos

    def _advance_to(self, end: int) -> None:
        """Advance position to end, counting newlines in the skipped segment."""
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Token construction
    # =========================================================================

    def _mark_start(self) -> None:
        """Record the current position as the start of the next token."""
        self._start = self._pos
        self._start_lineno = self._lineno
        self._start_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        literal: int | float | None = None,
    ) -> Token:
        """Create a Token spanning from the marked start to the current position.

        Args:
            token_type: The token type.
            value: The token value.
            literal: Parsed numeric value for number tokens.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._start_lineno,
            _col=self._start_col,
            _start_offset=self._start,
            _end_offset=self._pos,
            literal=literal,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
