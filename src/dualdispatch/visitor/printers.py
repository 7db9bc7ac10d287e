"""Expression rendering."""

from __future__ import annotations

from dualdispatch.visitor.base import ExpressionVisitor, visits
from dualdispatch.visitor.nodes import (
    Addition,
    BinaryExpression,
    Expression,
    Literal,
    Subtraction,
)


class ExpressionPrinter(ExpressionVisitor):
    """Render an expression as infix text.

    Only a subtraction on the right of an operator is parenthesized:
    ``13-4-(12-1)``. Every other operand is printed bare, so
    ``(13-4)-(12+1)`` renders as ``13-4-12+1``.
    """

    def __init__(self, number_format: str = "g") -> None:
        self.number_format = number_format

    def render(self, node: Expression) -> str:
        return node.accept(self)

    @visits(Literal)
    def _literal(self, node: Literal) -> str:
        return format(node.value, self.number_format)

    @visits(Addition, Subtraction)
    def _binary(self, node: BinaryExpression) -> str:
        left = node.left.accept(self)
        right = node.right.accept(self)
        if node.right.kind == Subtraction.kind:
            right = f"({right})"
        return f"{left}{node.symbol}{right}"


class ParenthesizingPrinter(ExpressionPrinter):
    """Wrap every binary node: ``1+(2+3)`` renders as ``(1+(2+3))``."""

    def _binary(self, node: BinaryExpression) -> str:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return f"({left}{node.symbol}{right})"
