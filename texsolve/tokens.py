"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import Span


class TokenKind(Enum):
    """Kinds of token, valued by their human-readable description."""

    END = "end of input"
    NUMBER = "number (numeric literal, e.g. 3.14, 42)"
    IDENTIFIER = "identifier (variable or symbol)"
    COMMAND = "Command (e.g. \\sqrt, \\sin)"
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    EQUAL = "="
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    def __str__(self) -> str:
        return self.value


COMMAND_OPERATORS: dict[str, TokenKind] = {
    "times": TokenKind.MUL,
    "div": TokenKind.DIV,
}

SYMBOL_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "^": TokenKind.POW,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "=": TokenKind.EQUAL,
}


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` holds a number's value or a name."""

    kind: TokenKind
    span: Span
    value: float | str | None = None