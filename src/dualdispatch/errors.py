"""Exceptions raised by the dispatch engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dualdispatch.kinds import Kind


class DispatchError(Exception):
    """Base class for dispatch engine errors."""


class DuplicateHandlerError(DispatchError):
    """A handler is already registered for this pair of kinds."""

    def __init__(self, first: Kind, second: Kind) -> None:
        self.first = first
        self.second = second
        msg = f"Handler already registered for ({first.name}, {second.name})"
        super().__init__(msg)


class TableFrozenError(DispatchError):
    """Registration attempted on a frozen dispatch table."""


class NoHandlerError(DispatchError, LookupError):
    """No handler for a pair of kinds (strict policy only)."""

    def __init__(self, first: Kind, second: Kind) -> None:
        self.first = first
        self.second = second
        msg = f"No handler registered for ({first.name}, {second.name})"
        super().__init__(msg)


class MalformedExpressionError(DispatchError, ValueError):
    """Expression text cannot be turned into a tree."""


class ConfigurationError(DispatchError):
    """Invalid configuration value."""
