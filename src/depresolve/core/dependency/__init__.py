"""Dependency resolution engine.

Public names are re-exported here so callers can write
``from depresolve.core.dependency import OrderedResolver``.

- ``Item``: immutable id plus dependency ids.
- ``GraphSource``: the interface every item source implements.
- ``Resolver``: transitive closures and lexically sorted schedules.
- ``OrderedResolver``: schedules in dependency order, rejecting cycles.
"""

from depresolve.core.dependency.item import Item
from depresolve.core.dependency.source import GraphSource
from depresolve.core.dependency.resolver import Resolver
from depresolve.core.dependency.ordered import OrderedResolver

__all__ = [
    "Item",
    "GraphSource",
    "Resolver",
    "OrderedResolver",
]
