"""Dispatch table mapping pairs of kinds to handlers.

Entries are declared once, at start-up, and read many times afterwards.
An unordered entry (the default) covers both orders of its pair; lookups
report whether the caller's order is the reverse of the declared one so
the resolver can put the arguments back in the order the handler expects.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any

from dualdispatch.errors import DuplicateHandlerError, TableFrozenError
from dualdispatch.kinds import DEFAULT_REGISTRY, Kind, KindRegistry, as_kind

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class HandlerEntry:
    """A registered handler and the pair it was declared for.

    Attributes:
        first: Kind of the handler's first parameter.
        second: Kind of the handler's second parameter.
        handler: Callable taking (first, second).
        ordered: If True, only the declared order matches.
    """

    first: Kind
    second: Kind
    handler: Handler
    ordered: bool = False

    @property
    def name(self) -> str:
        return getattr(self.handler, "__name__", repr(self.handler))


@dataclass(frozen=True)
class Lookup:
    """Result of a successful table lookup."""

    entry: HandlerEntry
    swapped: bool

    @property
    def handler(self) -> Handler:
        return self.entry.handler


Listener = Callable[[HandlerEntry], None]


class DispatchTable:
    """Registry of pairwise handlers.

    With ``thread_safe=True`` registration, lookup and subscription all
    run under one lock, so the table may be extended while other threads
    resolve against it. Listeners are called after the lock is released;
    if one raises, the new entry is removed again and the error propagates.
    """

    def __init__(
        self,
        *,
        thread_safe: bool = False,
        registry: KindRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self.registry = registry
        self.thread_safe = thread_safe
        self._entries: dict[tuple[Kind, Kind], HandlerEntry] = {}
        self._listeners: list[Listener] = []
        self._frozen = False
        self._lock = threading.Lock() if thread_safe else None

    def _guard(self) -> AbstractContextManager[Any]:
        return self._lock if self._lock is not None else nullcontext()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Refuse any further registration."""
        with self._guard():
            self._frozen = True
        logger.debug("Dispatch table frozen with %d entries", len(self._entries))

    def _conflict(self, first: Kind, second: Kind, *, ordered: bool) -> bool:
        if (first, second) in self._entries:
            return True
        reverse = self._entries.get((second, first))
        if reverse is None:
            return False
        # An ordered entry only clashes with the reverse one if that covers both orders
        return not (ordered and reverse.ordered)

    def register(
        self,
        first: Kind | type,
        second: Kind | type,
        handler: Handler,
        *,
        ordered: bool = False,
    ) -> HandlerEntry:
        """Register a handler for a pair of kinds.

        Args:
            first: Kind (or class) of the handler's first argument.
            second: Kind (or class) of the handler's second argument.
            handler: Callable taking the two operands in declared order.
            ordered: Match only the declared order.

        Returns:
            The new entry.

        Raises:
            DuplicateHandlerError: If the pair already has a handler.
            TableFrozenError: If the table has been frozen.
        """
        kind_a = as_kind(first, self.registry)
        kind_b = as_kind(second, self.registry)
        entry = HandlerEntry(kind_a, kind_b, handler, ordered)

        with self._guard():
            if self._frozen:
                msg = f"Cannot register {entry.name}: dispatch table is frozen"
                raise TableFrozenError(msg)
            if self._conflict(kind_a, kind_b, ordered=ordered):
                raise DuplicateHandlerError(kind_a, kind_b)
            self._entries[kind_a, kind_b] = entry
            listeners = list(self._listeners)

        # Listeners run outside the lock so they may use the table
        try:
            for listener in listeners:
                listener(entry)
        except Exception:
            with self._guard():
                if self._entries.get((kind_a, kind_b)) is entry:
                    del self._entries[kind_a, kind_b]
            logger.warning("Listener rejected %s, registration rolled back", entry.name)
            raise

        logger.info("Registered %s for (%s, %s)", entry.name, kind_a, kind_b)
        return entry

    def handler(
        self,
        first: Kind | type,
        second: Kind | type,
        *,
        ordered: bool = False,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of register()."""

        def decorator(func: Handler) -> Handler:
            self.register(first, second, func, ordered=ordered)
            return func

        return decorator

    def lookup(self, first: Kind | type, second: Kind | type) -> Lookup | None:
        """Find the handler for a pair, in either order.

        Returns:
            Lookup with ``swapped`` set when the handler was declared for the
            reverse order, or None if no handler applies.
        """
        kind_a = as_kind(first, self.registry)
        kind_b = as_kind(second, self.registry)
        with self._guard():
            entry = self._entries.get((kind_a, kind_b))
            if entry is not None:
                return Lookup(entry, swapped=False)
            entry = self._entries.get((kind_b, kind_a))
        if entry is None or entry.ordered:
            return None
        return Lookup(entry, swapped=True)

    def subscribe(self, listener: Listener) -> None:
        """Call listener with every entry registered from now on."""
        with self._guard():
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._guard():
            self._listeners = [cb for cb in self._listeners if cb != listener]

    def entries(self) -> list[HandlerEntry]:
        with self._guard():
            return list(self._entries.values())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.lookup(pair[0], pair[1]) is not None

    def __iter__(self) -> Iterator[HandlerEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)
