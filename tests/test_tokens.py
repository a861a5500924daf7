import pytest

from texsolve.errors import Span
from texsolve.lexer import Lexer
from texsolve.tokens import COMMAND_OPERATORS, SYMBOL_TOKENS, Token, TokenKind


def test_end_description():
    token = Token(TokenKind.END, Span(0, 0))
    assert str(token.kind) == "end of input"


def test_number_and_identifier_descriptions():
    number = Token(TokenKind.NUMBER, Span(0, 2), 42.0)
    ident = Token(TokenKind.IDENTIFIER, Span(0, 1), "x")
    assert str(number.kind) == "number (numeric literal, e.g. 3.14, 42)"
    assert str(ident.kind) == "identifier (variable or symbol)"


def test_command_operators():
    assert COMMAND_OPERATORS == {"times": TokenKind.MUL, "div": TokenKind.DIV}
    for name, kind in COMMAND_OPERATORS.items():
        tokens = Lexer("\\" + name).lex()
        assert tokens[0].kind is kind


@pytest.mark.parametrize("char, kind", sorted(SYMBOL_TOKENS.items()))
def test_symbol_kinds_describe_themselves(char, kind):
    token = Lexer(char).lex()[0]
    assert token.kind is kind
    assert str(token.kind) == char


def test_token_holds_value():
    token = Token(TokenKind.NUMBER, Span(0, 3), 4.5)
    assert token.value == 4.5
    assert token.span == Span(0, 3)
    assert token.kind is TokenKind.NUMBER


def test_token_value_defaults_to_none():
    token = Token(TokenKind.PLUS, Span(1, 2))
    assert token.value is None


def test_tokens_compare_by_fields():
    first = Token(TokenKind.IDENTIFIER, Span(0, 1), "x")
    second = Token(TokenKind.IDENTIFIER, Span(0, 1), "x")
    other = Token(TokenKind.IDENTIFIER, Span(0, 1), "y")
    assert first == second
    assert (first == other) is False