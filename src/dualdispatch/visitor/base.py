"""Visitor base class with kind-keyed handler tables.

Handlers are methods marked with @visits(NodeClass, ...). When a visitor
class is created its handlers are collected into a table keyed by node
Kind, merged with the tables of its bases. Adding a new node class only
requires a visitor that declares a handler for it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from dualdispatch.kinds import Kind, kind_for

if TYPE_CHECKING:
    from dualdispatch.visitor.nodes import Expression

F = TypeVar("F", bound=Callable[..., Any])


def visits(*node_types: type) -> Callable[[F], F]:
    """Mark a visitor method as the handler for the given node classes."""

    def decorator(func: F) -> F:
        func.__visits__ = node_types  # type: ignore[attr-defined]
        return func

    return decorator


class ExpressionVisitor:
    """Single dispatch over expression nodes by Kind.

    Strict visitors raise NotImplementedError for nodes they have no
    handler for. Non-strict visitors (``strict = False``) skip them and
    return None, like an acyclic visitor that only knows some node types.
    """

    strict: ClassVar[bool] = True
    _handlers: ClassVar[dict[Kind, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        handlers: dict[Kind, str] = {}
        for base in reversed(cls.__mro__[1:]):
            handlers.update(getattr(base, "_handlers", {}))
        for name, attr in vars(cls).items():
            for node_type in getattr(attr, "__visits__", ()):
                handlers[kind_for(node_type)] = name
        cls._handlers = handlers

    @classmethod
    def handles(cls, node_type: type) -> bool:
        return kind_for(node_type) in cls._handlers

    def visit(self, node: Expression) -> Any:
        name = self._handlers.get(node.kind)
        if name is None:
            return self.visit_missing(node)
        return getattr(self, name)(node)

    def visit_missing(self, node: Expression) -> Any:
        if self.strict:
            msg = f"{type(self).__name__} has no handler for {node.kind.name}"
            raise NotImplementedError(msg)
        return None
