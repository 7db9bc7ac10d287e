"""Testing utilities for dualdispatch."""

from __future__ import annotations

from typing import Any

from dualdispatch.resolver import Resolver
from dualdispatch.visitor.nodes import Addition, Expression, Literal, Subtraction

OPERATORS: dict[str, type[Addition | Subtraction]] = {
    "+": Addition,
    "-": Subtraction,
}


def assert_symmetric(resolver: Resolver, first: Any, second: Any) -> Any:
    """Resolve a pair in both orders and check the outcomes agree.

    Args:
        resolver: Resolver under test.
        first: Left operand.
        second: Right operand.

    Returns:
        The common outcome.
    """
    forward = resolver.resolve(first, second)
    backward = resolver.resolve(second, first)
    assert forward == backward, f"{forward!r} != {backward!r}"
    return forward


def tree_from_nested(nested: Any) -> Expression:
    """Build a tree from nested tuples.

    Numbers become literals and ``(op, left, right)`` tuples become binary
    nodes, e.g. ``("-", ("-", 13, 4), ("+", 12, 1))``.
    """
    if isinstance(nested, Expression):
        return nested
    if isinstance(nested, int | float):
        return Literal(float(nested))
    op, left, right = nested
    return OPERATORS[op](tree_from_nested(left), tree_from_nested(right))
