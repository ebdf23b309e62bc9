"""Graph source interface consumed by the resolvers.

A graph source owns the full set of items for one problem instance. The
resolvers need only two capabilities from it: enumerate every item, and
look one item up by id. Concrete sources (in-memory mappings, flat files,
YAML documents, inverted views of another source) live in
``depresolve.sources`` and implement ``_load_items``.

Items are loaded lazily on first access and cached, so the graph is stable
for the lifetime of any resolver built on it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from depresolve.core.dependency.item import Item
from depresolve.exceptions import ConstructionError

logger = logging.getLogger(__name__)


class GraphSource(ABC):
    """Abstract base class for a read-only collection of items."""

    def __init__(self) -> None:
        self._items: list[Item] | None = None
        self._index: dict[str, Item] = {}

    @abstractmethod
    def _load_items(self) -> list[Item]:
        """Materialise every item in the graph.

        Called at most once per source instance.

        Raises:
            ConstructionError: If the underlying data is malformed.
        """

    def load(self) -> None:
        """Load and index the items if that has not happened yet.

        Raises:
            ConstructionError: If the data is malformed or two items
                share an id.
        """
        if self._items is not None:
            return
        items = self._load_items()
        index: dict[str, Item] = {}
        for item in items:
            if item.id in index:
                raise ConstructionError(f"Duplicate item id {item.id!r} in source")
            index[item.id] = item
        self._index = index
        self._items = sorted(items, key=lambda i: i.id)
        logger.debug("%s loaded %d item(s)", type(self).__name__, len(self._items))

    def items(self) -> list[Item]:
        """Return every item in the source, in ascending id order."""
        self.load()
        return list(self._items or [])

    def item(self, item_id: str) -> Item | None:
        """Return the item with *item_id*, or None if there is none."""
        self.load()
        return self._index.get(item_id)

    def missing_dependencies(self) -> list[str]:
        """Return the orphan ids referenced by items but absent from the source.

        Returns:
            Sorted, de-duplicated ids. Empty for a complete graph.
        """
        self.load()
        return sorted({
            dep
            for item in self._items or []
            for dep in item.depends
            if dep not in self._index
        })

    def __len__(self) -> int:
        self.load()
        return len(self._index)

    def __contains__(self, item_id: object) -> bool:
        self.load()
        return item_id in self._index
