"""Build expression trees from arithmetic text.

The text is parsed with Python's own parser and the resulting AST is
translated node by node. Only numeric literals, ``+``, ``-``, unary minus
on literals and parentheses are accepted.
"""

from __future__ import annotations

import ast
from functools import singledispatch

from dualdispatch.errors import MalformedExpressionError
from dualdispatch.visitor.nodes import Addition, Expression, Literal, Subtraction


def parse_expression(source: str) -> Expression:
    """Parse arithmetic text into an expression tree.

    Args:
        source: Text such as ``"(13-4)-(12+1)"``.

    Returns:
        Root node of the tree.

    Raises:
        MalformedExpressionError: If the text is not a supported expression.
    """
    text = source.strip()
    if not text:
        msg = "Empty expression"
        raise MalformedExpressionError(msg)
    try:
        tree = ast.parse(text, mode="eval")
        return build_node(tree.body)
    except SyntaxError as e:
        msg = f"Invalid expression {source!r}: {e.msg}"
        raise MalformedExpressionError(msg) from e
    except RecursionError as e:
        msg = "Expression too deeply nested"
        raise MalformedExpressionError(msg) from e


@singledispatch
def build_node(node: ast.expr) -> Expression:
    """Translate one AST node."""
    msg = f"Unsupported syntax: {type(node).__name__}"
    raise MalformedExpressionError(msg)


@build_node.register
def _constant(node: ast.Constant) -> Expression:
    match node.value:
        case bool():
            # True and False are ints to Python but not to us
            pass
        case int() | float() as value:
            return Literal(float(value))
    msg = f"Unsupported literal: {node.value!r}"
    raise MalformedExpressionError(msg)


@build_node.register
def _unary(node: ast.UnaryOp) -> Expression:
    operand = build_node(node.operand)
    if isinstance(node.op, ast.UAdd) and isinstance(operand, Literal):
        return operand
    if isinstance(node.op, ast.USub) and isinstance(operand, Literal):
        return Literal(-operand.value)
    msg = f"Unsupported unary operator: {type(node.op).__name__}"
    raise MalformedExpressionError(msg)


@build_node.register
def _binop(node: ast.BinOp) -> Expression:
    left = build_node(node.left)
    right = build_node(node.right)
    match node.op:
        case ast.Add():
            return Addition(left, right)
        case ast.Sub():
            return Subtraction(left, right)
    msg = f"Unsupported operator: {type(node.op).__name__}"
    raise MalformedExpressionError(msg)
