"""Collect every lexical error from one pass and report them together."""

from kara import LexicalErrors, tokenize

source = 'let price = 99999999999999999999;\nlet tag = @label;\nlet name = "unclosed'

try:
    tokenize(source, source_file="shop.kara", strict=True)
except LexicalErrors as exc:
    for error in exc.errors:
        print(error)
