"""Pull-based scanner for the Kara language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + navigation)
├── charsets.py          # Character classification sets
└── scanners/            # Category-specific scanning
    ├── trivia.py        # Whitespace and line comments
    ├── words.py         # Identifiers and keywords
    ├── literals.py      # Strings and numbers
    └── operators.py     # Punctuation and operators

Usage:
    >>> from kara.lexer import Scanner
    >>> for token in Scanner('let greeting = "hi";'):
    ...     print(token)
Token(LET, 'let', 1:1)
Token(IDENTIFIER, 'greeting', 1:5)
Token(EQUAL, '=', 1:14)
Token(STRING, 'hi', 1:16)
Token(SEMICOLON, ';', 1:20)
Token(EOF, '', 1:21)

"""

from kara.lexer.core import Scanner

__all__ = ["Scanner"]
