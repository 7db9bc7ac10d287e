"""Collision outcomes between game objects.

A small domain built on the dispatch table: each unordered pair of object
kinds may have an outcome. Pairs without one pass each other harmlessly.
"""

from __future__ import annotations

from typing import Any

from dualdispatch.config import DispatchConfig
from dualdispatch.kinds import Operand
from dualdispatch.resolver import Resolver
from dualdispatch.table import DispatchTable

HARMLESS = "objects pass each other harmlessly"


class GameObject(Operand):
    """Base class for objects that can collide."""

    def collide(self, other: GameObject) -> Any:
        return collide(self, other)


class Planet(GameObject):
    pass


class Asteroid(GameObject):
    pass


class Spaceship(GameObject):
    pass


def spaceship_planet(spaceship: Spaceship, planet: Planet) -> str:
    return "Spaceship lands on a planet"


def asteroid_planet(asteroid: Asteroid, planet: Planet) -> str:
    return "Asteroid burns up in the planet's atmosphere"


def asteroid_spaceship(spaceship: Spaceship, asteroid: Asteroid) -> str:
    return "Asteroid hits and destroys the spaceship"


OBJECT_TYPES: dict[str, type[GameObject]] = {
    "planet": Planet,
    "asteroid": Asteroid,
    "spaceship": Spaceship,
}


def build_collision_table(config: DispatchConfig | None = None) -> DispatchTable:
    """Create the table of collision outcomes."""
    config = config or DispatchConfig()
    table = DispatchTable(thread_safe=config.thread_safe)
    table.register(Spaceship, Planet, spaceship_planet)
    table.register(Asteroid, Planet, asteroid_planet)
    table.register(Spaceship, Asteroid, asteroid_spaceship)
    if config.freeze:
        table.freeze()
    return table


_resolver: Resolver | None = None


def collision_resolver(config: DispatchConfig | None = None) -> Resolver:
    """Return a resolver for collisions.

    Without a config the shared default resolver is returned; it is built
    on first use.
    """
    global _resolver
    if config is not None:
        return Resolver(build_collision_table(config), config)
    if _resolver is None:
        _resolver = Resolver(build_collision_table())
    return _resolver


def collide(first: GameObject, second: GameObject) -> Any:
    """Outcome of a collision, or NO_HANDLER."""
    return collision_resolver().resolve(first, second)


def make_object(name: str) -> GameObject:
    """Instantiate a game object from its lowercase name."""
    try:
        return OBJECT_TYPES[name.lower()]()
    except KeyError:
        msg = f"Unknown object {name!r}; expected one of {', '.join(OBJECT_TYPES)}"
        raise ValueError(msg) from None
