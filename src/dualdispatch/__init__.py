"""dualdispatch: double dispatch tables and expression visitors."""

from __future__ import annotations

from dualdispatch.cli import main
from dualdispatch.config import DispatchConfig, load_config
from dualdispatch.errors import (
    ConfigurationError,
    DispatchError,
    DuplicateHandlerError,
    MalformedExpressionError,
    NoHandlerError,
    TableFrozenError,
)
from dualdispatch.kinds import Kind, KindRegistry, Operand, kind_for, kind_of
from dualdispatch.resolver import NO_HANDLER, NoHandler, Resolver
from dualdispatch.table import DispatchTable, HandlerEntry, Lookup

__all__ = [
    "NO_HANDLER",
    "ConfigurationError",
    "DispatchConfig",
    "DispatchError",
    "DispatchTable",
    "DuplicateHandlerError",
    "HandlerEntry",
    "Kind",
    "KindRegistry",
    "Lookup",
    "MalformedExpressionError",
    "NoHandler",
    "NoHandlerError",
    "Operand",
    "Resolver",
    "TableFrozenError",
    "kind_for",
    "kind_of",
    "load_config",
    "main",
]
