"""Resolver - double dispatch over a DispatchTable.

A missing handler is an outcome, not a failure: resolve() returns the
NO_HANDLER singleton. Strict configurations turn it into NoHandlerError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any, Final

from dualdispatch.config import DispatchConfig
from dualdispatch.errors import NoHandlerError
from dualdispatch.table import DispatchTable

logger = logging.getLogger(__name__)


class NoHandler:
    """Outcome of resolving a pair that has no handler."""

    _instance: NoHandler | None = None

    def __new__(cls) -> NoHandler:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_HANDLER"

    def __reduce__(self) -> str:
        return "NO_HANDLER"


NO_HANDLER: Final = NoHandler()


class Resolver:
    """Resolves operand pairs to handler calls."""

    def __init__(
        self,
        table: DispatchTable,
        config: DispatchConfig | None = None,
    ) -> None:
        self.table = table
        self.config = config or DispatchConfig()

    def find(self, first: Any, second: Any) -> Callable[[], Any] | None:
        """Return the handler bound to its arguments, or None."""
        registry = self.table.registry
        kind_a = registry.kind_of(first)
        kind_b = registry.kind_of(second)

        found = self.table.lookup(kind_a, kind_b)
        if found is None:
            logger.debug("No handler for (%s, %s)", kind_a, kind_b)
            return None

        logger.debug(
            "Resolved (%s, %s) to %s%s",
            kind_a,
            kind_b,
            found.entry.name,
            " (swapped)" if found.swapped else "",
        )
        if found.swapped:
            return partial(found.handler, second, first)
        return partial(found.handler, first, second)

    def resolve(self, first: Any, second: Any) -> Any:
        """Call the handler for (first, second).

        Returns:
            The handler's result, or NO_HANDLER when no handler exists.

        Raises:
            NoHandlerError: If no handler exists and the policy is strict.
        """
        call = self.find(first, second)
        if call is None:
            if self.config.strict:
                registry = self.table.registry
                raise NoHandlerError(registry.kind_of(first), registry.kind_of(second))
            return NO_HANDLER
        return call()

    __call__ = resolve
