"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classification is ASCII-only: any other character scans as ILLEGAL.
"""

import string

# Insignificant between tokens; only "\n" advances the line counter
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

DIGITS: frozenset[str] = frozenset(string.digits)

IDENT_START: frozenset[str] = frozenset(string.ascii_letters + "_")

IDENT_CHARS: frozenset[str] = IDENT_START | DIGITS

QUOTE = '"'

DECIMAL_POINT = "."
