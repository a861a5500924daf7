"""Expression tree nodes and the visitor interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .utils import trim_trailing


class ExprVisitor(ABC):
    """Receives a callback for each kind of expression node."""

    @abstractmethod
    def visit_binary_op(self, node: BinaryOperation) -> None: ...

    @abstractmethod
    def visit_function(self, node: Function) -> None: ...

    @abstractmethod
    def visit_number(self, node: Number) -> None: ...

    @abstractmethod
    def visit_symbol(self, node: Symbol) -> None: ...


class Expr(ABC):
    """An expression node."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> None:
        """Dispatch to the visitor method for this node kind."""

    @abstractmethod
    def __str__(self) -> str: ...


class OperatorType(Enum):
    """Binary arithmetic operators, valued by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BinaryOperation(Expr):
    left: Expr
    operator: OperatorType
    right: Expr

    def accept(self, visitor: ExprVisitor) -> None:
        visitor.visit_binary_op(self)

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class Function(Expr):
    name: str
    argument: Expr

    def accept(self, visitor: ExprVisitor) -> None:
        visitor.visit_function(self)

    def __str__(self) -> str:
        return f"{self.name}({self.argument})"


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").removesuffix(".")
    return text


@dataclass(frozen=True)
class Number(Expr):
    value: float

    def accept(self, visitor: ExprVisitor) -> None:
        visitor.visit_number(self)

    def __str__(self) -> str:
        return trim_trailing("0", _float_text(float(self.value)))


@dataclass(frozen=True)
class Symbol(Expr):
    name: str

    def accept(self, visitor: ExprVisitor) -> None:
        visitor.visit_symbol(self)

    def __str__(self) -> str:
        return self.name