"""Graph source backed by an in-memory mapping of id -> dependency ids.

The simplest source form::

    MappingSource({
        "foo": ["bar", "baz"],
        "bar": [],
        "baz": ["bar"],
    })
"""

from __future__ import annotations

from collections.abc import Mapping

from depresolve.core.dependency.item import Item
from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import ConstructionError


class MappingSource(GraphSource):
    """Source built from a mapping of item id to a list of dependency ids.

    The mapping is copied and its items built at construction, so invalid
    ids fail immediately and later changes to the caller's dict do not
    leak into the source.

    Args:
        mapping: Item id -> list (or tuple) of dependency ids. An empty
            list means the item has no dependencies.

    Raises:
        ConstructionError: If *mapping* is not a mapping or a value is not
            a list or tuple, or an id is invalid.
    """

    def __init__(self, mapping: Mapping[str, list[str]]) -> None:
        super().__init__()
        if not isinstance(mapping, Mapping):
            raise ConstructionError(
                f"Expected a mapping of id -> dependency list, got {type(mapping).__name__}"
            )
        data: dict[str, list[str]] = {}
        for item_id, deps in mapping.items():
            if not isinstance(deps, (list, tuple)):
                raise ConstructionError(
                    f"Dependencies of {item_id!r} must be a list, got {type(deps).__name__}"
                )
            data[item_id] = list(deps)
        self._mapping = data
        self.load()

    def _load_items(self) -> list[Item]:
        return [Item.of(item_id, deps) for item_id, deps in self._mapping.items()]

    def as_dict(self) -> dict[str, list[str]]:
        """Return a copy of the id -> dependency list mapping."""
        return {item_id: list(deps) for item_id, deps in self._mapping.items()}
