"""Source spans and the errors raised while reading expressions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open range of UTF-8 byte offsets into the source text."""

    start: int
    end: int


class SolverError(Exception):
    """Base class for errors tied to a location in the source."""

    def __init__(self, span: Span) -> None:
        self.span = span
        super().__init__(str(self))

    def describe(self) -> str:
        """Return a short description without the position."""
        return "error"

    def _summary(self) -> str:
        return self.describe()

    def __str__(self) -> str:
        return f"{self._summary()} at position {self.span.start}"


class UnexpectedCharacterError(SolverError):
    """A character that cannot start any token."""

    def __init__(self, char: str, span: Span) -> None:
        self.char = char
        super().__init__(span)

    def describe(self) -> str:
        return f"unexpected character '{self.char}'"


class InvalidNumberError(SolverError):
    """A numeric literal that could not be read."""

    def describe(self) -> str:
        return "invalid number literal"

    def _summary(self) -> str:
        return "invalid number"


class UnknownCommandError(SolverError):
    """A backslash command that is not recognised."""

    def __init__(self, name: str, span: Span) -> None:
        self.name = name
        super().__init__(span)

    def describe(self) -> str:
        return f"unknown command \\{self.name}"


class UnexpectedTokenError(SolverError):
    """A token other than the one the grammar requires."""

    def __init__(self, expected: str, found: str, span: Span) -> None:
        self.expected = expected
        self.found = found
        super().__init__(span)

    def describe(self) -> str:
        return f"expected {self.expected}, found {self.found}"

    def _summary(self) -> str:
        return f"expected {self.expected}, but found {self.found}"