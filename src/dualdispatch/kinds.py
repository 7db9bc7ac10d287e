"""Kind registry - stable runtime identifiers for operand classes.

A Kind is assigned once per class, the first time the class is seen, and
never changes afterwards. Operand subclasses register themselves when the
class is created; any other class is registered on first lookup.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Any, ClassVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kind:
    """Identifier for a concrete operand class.

    Attributes:
        name: Qualified class name, for display only.
        ident: Registry-unique number; distinguishes classes sharing a name.
    """

    name: str
    ident: int

    def __str__(self) -> str:
        return self.name


class KindRegistry:
    """Assigns and remembers one Kind per class."""

    def __init__(self) -> None:
        self._kinds: dict[type, Kind] = {}
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def kind_for(self, cls: type) -> Kind:
        """Return the kind of a class, assigning one on first request."""
        kind = self._kinds.get(cls)
        if kind is not None:
            return kind
        with self._lock:
            # Another thread may have won the race
            kind = self._kinds.get(cls)
            if kind is None:
                kind = Kind(cls.__qualname__, next(self._counter))
                self._kinds[cls] = kind
                logger.debug("Assigned kind %s#%d", kind.name, kind.ident)
        return kind

    def kind_of(self, instance: Any) -> Kind:
        """Return the kind of an instance's concrete class."""
        return self.kind_for(type(instance))

    def known(self) -> tuple[Kind, ...]:
        """All kinds assigned so far, in assignment order."""
        with self._lock:
            kinds = list(self._kinds.values())
        return tuple(sorted(kinds, key=lambda k: k.ident))

    def __contains__(self, cls: object) -> bool:
        return cls in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


DEFAULT_REGISTRY = KindRegistry()


def kind_for(cls: type) -> Kind:
    """Kind of a class in the default registry."""
    return DEFAULT_REGISTRY.kind_for(cls)


def kind_of(instance: Any) -> Kind:
    """Kind of an instance in the default registry."""
    return DEFAULT_REGISTRY.kind_of(instance)


def as_kind(value: Kind | type, registry: KindRegistry = DEFAULT_REGISTRY) -> Kind:
    """Accept either a Kind or a class and return a Kind."""
    if isinstance(value, Kind):
        return value
    return registry.kind_for(value)


class Operand:
    """Base class for values taking part in dispatch.

    Every subclass gets its ``kind`` when the class statement runs.
    """

    kind: ClassVar[Kind]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.kind = DEFAULT_REGISTRY.kind_for(cls)
