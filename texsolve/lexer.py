"""Turns LaTeX-style expression text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import InvalidNumberError, Span, UnexpectedCharacterError, UnknownCommandError
from .tokens import COMMAND_OPERATORS, SYMBOL_TOKENS, Token, TokenKind

_END_CHAR = "\0"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_name_char(char: str) -> bool:
    return char.isalpha() or char == "_"


class Lexer:
    """Lexer over one source string; spans are UTF-8 byte offsets."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._byte_pos = 0

    @property
    def source(self) -> str:
        return self._source

    def lex(self) -> list[Token]:
        """Tokenize the remaining input, ending with an END token."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self._next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def _current(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return _END_CHAR

    def _advance(self) -> None:
        if self._pos < len(self._source):
            self._byte_pos += len(self._source[self._pos].encode("utf-8"))
        self._pos += 1

    def _skip_whitespace(self) -> None:
        while self._current().isspace():
            self._advance()

    def _read_while(self, predicate) -> str:
        chars = []
        while predicate(self._current()):
            chars.append(self._current())
            self._advance()
        return "".join(chars)

    def _lex_number(self) -> Token:
        start = self._byte_pos
        chars = []
        has_dot = False
        while _is_digit(self._current()) or (self._current() == "." and not has_dot):
            if self._current() == ".":
                has_dot = True
            chars.append(self._current())
            self._advance()
        span = Span(start, self._byte_pos)
        text = "".join(chars)
        if text == ".":
            raise InvalidNumberError(span)
        try:
            value = float(text)
        except ValueError:
            raise InvalidNumberError(span) from None
        return Token(TokenKind.NUMBER, span, value)

    def _lex_command(self) -> Token:
        start = self._byte_pos
        self._advance()
        name = self._read_while(_is_name_char)
        span = Span(start, self._byte_pos)
        kind = COMMAND_OPERATORS.get(name)
        if kind is None:
            raise UnknownCommandError(name, span)
        return Token(kind, span)

    def _lex_identifier(self) -> Token:
        start = self._byte_pos
        name = self._read_while(_is_name_char)
        return Token(TokenKind.IDENTIFIER, Span(start, self._byte_pos), name)

    def _next_token(self) -> Token:
        self._skip_whitespace()
        start = self._byte_pos
        char = self._current()

        if char == _END_CHAR:
            return Token(TokenKind.END, Span(start, start))
        if _is_digit(char) or char == ".":
            return self._lex_number()
        if char == "\\":
            return self._lex_command()
        if char.isalpha():
            return self._lex_identifier()

        kind = SYMBOL_TOKENS.get(char)
        self._advance()
        span = Span(start, self._byte_pos)
        if kind is None:
            raise UnexpectedCharacterError(char, span)
        return Token(kind, span)