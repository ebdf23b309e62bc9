"""Item: a single vertex in a dependency hierarchy.

An item is an id plus the ids it depends on. It carries no behaviour; the
resolvers are responsible for deduplication, orphan handling, and ordering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from depresolve.exceptions import ConstructionError


def _valid_id(value: object) -> bool:
    return isinstance(value, str) and value != ""


@dataclass(frozen=True)
class Item:
    """An immutable item with an id and an ordered list of dependency ids.

    Dependency ids may be duplicated and may name ids absent from the
    graph (orphans); both are preserved as given.

    Attributes:
        id: Non-empty identifier, unique within one graph source.
        depends: Dependency ids in their original order.

    Raises:
        ConstructionError: If the id or any dependency id is empty or not
            a string.
    """

    id: str
    depends: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not _valid_id(self.id):
            raise ConstructionError(f"Invalid item id: {self.id!r}")
        if isinstance(self.depends, str):
            raise ConstructionError(
                f"Dependencies of {self.id!r} must be a list of ids, not a string"
            )
        deps = tuple(self.depends)
        for dep in deps:
            if not _valid_id(dep):
                raise ConstructionError(
                    f"Invalid dependency id {dep!r} on item {self.id!r}"
                )
        object.__setattr__(self, "depends", deps)

    @classmethod
    def of(cls, item_id: str, depends: Iterable[str] = ()) -> Item:
        """Build an item from an id and any iterable of dependency ids."""
        return cls(item_id, depends)  # type: ignore[arg-type]
