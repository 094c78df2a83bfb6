"""Token and TokenType definitions for the Kara scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a type, string value, optional numeric literal, and
source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
This avoids allocating SourceLocation objects for tokens whose location
is never accessed.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kara.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner.

    Organized by category:
    - Stream structure (EOF)
    - Keywords
    - Identifiers and literals
    - Punctuation and operators
    - Lexical errors

    """

    # Stream structure
    EOF = auto()

    # Keywords
    LET = auto()
    IF = auto()
    FLOW = auto()
    RECORD = auto()
    TYPE = auto()
    FN = auto()
    TRUE = auto()
    FALSE = auto()
    AS = auto()

    # Identifiers and literals
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()

    # Punctuation - single character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    DOT = auto()  # .
    EQUAL = auto()  # =
    BANG = auto()  # !
    LESS = auto()  # <
    GREATER = auto()  # >

    # Operators - two characters
    ARROW = auto()  # ->
    EQUAL_EQUAL = auto()  # ==
    BANG_EQUAL = auto()  # !=
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=

    # Lexical errors (in-band, never raised)
    ILLEGAL = auto()
    UNTERMINATED_STRING = auto()
    MALFORMED_NUMBER = auto()

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_TYPES

    @property
    def is_error(self) -> bool:
        return self in _ERROR_TYPES


# Reserved words, looked up once per fully scanned identifier span
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "let": TokenType.LET,
        "if": TokenType.IF,
        "flow": TokenType.FLOW,
        "record": TokenType.RECORD,
        "type": TokenType.TYPE,
        "fn": TokenType.FN,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "as": TokenType.AS,
    }
)

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ":": TokenType.COLON,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.STAR,
        "/": TokenType.SLASH,
        ".": TokenType.DOT,
        "=": TokenType.EQUAL,
        "!": TokenType.BANG,
        "<": TokenType.LESS,
        ">": TokenType.GREATER,
    }
)

# Keyed by first character, then second character
TWO_CHAR_TOKENS: Mapping[str, Mapping[str, TokenType]] = MappingProxyType(
    {
        "-": MappingProxyType({">": TokenType.ARROW}),
        "=": MappingProxyType({"=": TokenType.EQUAL_EQUAL}),
        "!": MappingProxyType({"=": TokenType.BANG_EQUAL}),
        "<": MappingProxyType({"=": TokenType.LESS_EQUAL}),
        ">": MappingProxyType({"=": TokenType.GREATER_EQUAL}),
    }
)

_KEYWORD_TYPES: frozenset[TokenType] = frozenset(KEYWORDS.values())

_ERROR_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.ILLEGAL,
        TokenType.UNTERMINATED_STRING,
        TokenType.MALFORMED_NUMBER,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Tokens are the atomic units passed from scanner to parser.

    Attributes:
        type: The token type (from TokenType enum)
        value: Source text of the token. For STRING this is the content
            between the quotes; for error tokens the offending text;
            empty for EOF.
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        literal: Parsed value for INTEGER (int) and FLOAT (float) tokens
        _end_lineno: End line number (for strings spanning lines)
        _end_col: End column offset
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy location cache uses idempotent write.

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    literal: int | float | None = None
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from kara.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_error(self) -> bool:
        return self.type.is_error

    @property
    def message(self) -> str:
        """Human-readable diagnostic for error tokens.

        Returns:
            Description of the lexical error, or "" for valid tokens.
        """
        if self.type is TokenType.ILLEGAL:
            return f"illegal character {self.value!r}"
        if self.type is TokenType.UNTERMINATED_STRING:
            return "unterminated string literal"
        if self.type is TokenType.MALFORMED_NUMBER:
            return f"malformed numeric literal {self.value!r}"
        return ""
