"""Visitor adapter - rendering and evaluating expression trees."""

from __future__ import annotations

from dualdispatch.visitor.base import ExpressionVisitor, visits
from dualdispatch.visitor.evaluator import ExpressionEvaluator
from dualdispatch.visitor.nodes import (
    Addition,
    BinaryExpression,
    Expression,
    Literal,
    Subtraction,
)
from dualdispatch.visitor.printers import ExpressionPrinter, ParenthesizingPrinter

__all__ = [
    "Addition",
    "BinaryExpression",
    "Expression",
    "ExpressionEvaluator",
    "ExpressionPrinter",
    "ExpressionVisitor",
    "Literal",
    "ParenthesizingPrinter",
    "Subtraction",
    "visits",
]
