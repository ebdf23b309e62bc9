"""Graph source that logically inverts another source.

Every "X depends on Y" edge of the underlying source becomes "Y is
depended on by X", stored on Y. Resolving against the inverted source
answers "what is affected if Y changes?" with the ordinary resolvers.
"""

from __future__ import annotations

from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import ConstructionError
from depresolve.sources.mapping import MappingSource


class InvertedSource(MappingSource):
    """Source with every edge of *source* reversed.

    Each underlying item appears, with an empty list if nothing depends
    on it. An orphan id in the underlying source becomes an item here,
    listing the items that referenced it.

    Args:
        source: The source to invert.

    Raises:
        ConstructionError: If *source* is not a ``GraphSource``.
    """

    def __init__(self, source: GraphSource) -> None:
        if not isinstance(source, GraphSource):
            raise ConstructionError(
                f"source must be a GraphSource, got {type(source).__name__}"
            )
        items = source.items()
        inverted: dict[str, list[str]] = {item.id: [] for item in items}
        for item in items:
            for dep in item.depends:
                inverted.setdefault(dep, []).append(item.id)
        self.original = source
        super().__init__(inverted)
