"""Expression tree nodes.

Nodes are immutable and own their children; a tree is built bottom-up, so
it can never contain a cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from dualdispatch.kinds import Operand

if TYPE_CHECKING:
    from dualdispatch.visitor.base import ExpressionVisitor


@dataclass(frozen=True)
class Expression(Operand):
    """Base class for expression nodes."""

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit(self)


@dataclass(frozen=True)
class Literal(Expression):
    """Numeric leaf."""

    value: float


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """Node combining two sub-expressions with an operator."""

    left: Expression
    right: Expression

    symbol: ClassVar[str] = "?"


@dataclass(frozen=True)
class Addition(BinaryExpression):
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Subtraction(BinaryExpression):
    symbol: ClassVar[str] = "-"
