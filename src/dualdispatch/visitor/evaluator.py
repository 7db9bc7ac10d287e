"""Numeric evaluation of expression trees."""

from __future__ import annotations

from dualdispatch.visitor.base import ExpressionVisitor, visits
from dualdispatch.visitor.nodes import Addition, Expression, Literal, Subtraction


class ExpressionEvaluator(ExpressionVisitor):
    """Evaluate left operand first, then right."""

    def evaluate(self, node: Expression) -> float:
        return node.accept(self)

    @visits(Literal)
    def _literal(self, node: Literal) -> float:
        return node.value

    @visits(Addition)
    def _addition(self, node: Addition) -> float:
        left = node.left.accept(self)
        return left + node.right.accept(self)

    @visits(Subtraction)
    def _subtraction(self, node: Subtraction) -> float:
        left = node.left.accept(self)
        return left - node.right.accept(self)
