"""Tests ensuring scanner cursor state is consistent between calls."""

from __future__ import annotations

import pytest

from kara.config import ScanConfig, scan_config_context
from kara.lexer import Scanner
from kara.tokens import TokenType


class TestCursorState:
    """Verify the cursor sits right after each consumed token."""

    def test_cursor_after_each_token(self) -> None:
        scanner = Scanner("ab  ->\n1.5")

        scanner.next_token()
        assert scanner._pos == 2
        scanner.next_token()
        assert scanner._pos == 6
        scanner.next_token()
        assert scanner._pos == 10
        assert scanner._lineno == 2

    def test_start_never_passes_position(self) -> None:
        scanner = Scanner('x "y" 3 @ // z\n')
        for token in scanner:
            assert 0 <= scanner._start <= scanner._pos

    def test_look_ahead_does_not_consume(self) -> None:
        scanner = Scanner("-x")

        token = scanner.next_token()
        assert token.type == TokenType.MINUS
        assert scanner._pos == 1

    def test_trailing_trivia_consumed_at_eof(self) -> None:
        scanner = Scanner("x  \n // done\n")
        list(scanner.tokenize())

        assert scanner._pos == len("x  \n // done\n")
        assert scanner._lineno == 3


class TestTerminalState:
    """EOF is idempotent."""

    def test_repeated_eof(self) -> None:
        scanner = Scanner("x")
        assert scanner.next_token().type == TokenType.IDENTIFIER

        for _ in range(3):
            assert scanner.next_token().type == TokenType.EOF

    def test_tokenize_after_eof(self) -> None:
        scanner = Scanner("x")
        list(scanner.tokenize())

        assert [t.type for t in scanner.tokenize()] == [TokenType.EOF]

    def test_unterminated_string_then_eof(self) -> None:
        scanner = Scanner('"open')

        assert scanner.next_token().type == TokenType.UNTERMINATED_STRING
        assert scanner.next_token().type == TokenType.EOF
        assert scanner.next_token().type == TokenType.EOF


class TestInstanceIsolation:
    """Scanners share no state."""

    def test_interleaved_scanners(self) -> None:
        first = Scanner("a b c")
        second = Scanner("\n\nx y")

        assert first.next_token().value == "a"
        assert second.next_token().lineno == 3
        assert first.next_token().value == "b"
        assert second.next_token().value == "y"
        assert first.next_token().lineno == 1

    def test_config_captured_at_construction(self) -> None:
        no_minus = ScanConfig(single_char_tokens=ScanConfig().single_char_tokens - {"-"})
        with scan_config_context(no_minus):
            scanner = Scanner("- -")

        assert scanner.next_token().type == TokenType.ILLEGAL
        assert Scanner("-").next_token().type == TokenType.MINUS


class TestConfiguredTokenSet:
    """Behaviour that depends on which single-character tokens are enabled."""

    @pytest.fixture
    def no_minus(self) -> ScanConfig:
        return ScanConfig(single_char_tokens=ScanConfig().single_char_tokens - {"-"})

    def test_lone_minus_is_illegal(self, no_minus: ScanConfig) -> None:
        tokens = list(Scanner("-", config=no_minus).tokenize())

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.ILLEGAL, "-"),
            (TokenType.EOF, ""),
        ]

    def test_arrow_still_scans(self, no_minus: ScanConfig) -> None:
        tokens = list(Scanner("a -> b - c", config=no_minus).tokenize())

        assert [t.type for t in tokens] == [
            TokenType.IDENTIFIER,
            TokenType.ARROW,
            TokenType.IDENTIFIER,
            TokenType.ILLEGAL,
            TokenType.IDENTIFIER,
            TokenType.EOF,
        ]

    def test_dot_disabled_after_number(self) -> None:
        no_dot = ScanConfig(single_char_tokens=ScanConfig().single_char_tokens - {"."})
        tokens = list(Scanner("42.", config=no_dot).tokenize())

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.INTEGER, "42"),
            (TokenType.ILLEGAL, "."),
            (TokenType.EOF, ""),
        ]

    def test_custom_comment_prefix(self) -> None:
        config = ScanConfig(comment_prefix="#")
        tokens = list(Scanner("a # b\n// c", config=config).tokenize())

        assert [t.type for t in tokens] == [
            TokenType.IDENTIFIER,
            TokenType.SLASH,
            TokenType.SLASH,
            TokenType.IDENTIFIER,
            TokenType.EOF,
        ]

    def test_narrow_integers(self) -> None:
        config = ScanConfig(integer_bits=8)
        tokens = list(Scanner("127 128", config=config).tokenize())

        assert [(t.type, t.literal) for t in tokens] == [
            (TokenType.INTEGER, 127),
            (TokenType.MALFORMED_NUMBER, None),
            (TokenType.EOF, None),
        ]
