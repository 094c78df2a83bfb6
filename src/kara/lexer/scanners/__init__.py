"""Scanner mixins, one per lexical category."""

from kara.lexer.scanners.literals import LiteralScannerMixin
from kara.lexer.scanners.operators import OperatorScannerMixin
from kara.lexer.scanners.trivia import TriviaScannerMixin
from kara.lexer.scanners.words import WordScannerMixin

__all__ = [
    "LiteralScannerMixin",
    "OperatorScannerMixin",
    "TriviaScannerMixin",
    "WordScannerMixin",
]
