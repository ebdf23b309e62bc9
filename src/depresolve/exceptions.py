"""depresolve exception hierarchy.

All public exceptions inherit from DependencyError, giving callers a single
base class to catch when they want to handle any depresolve-specific failure
without swallowing unrelated errors. An empty result (``[]``) is never an
error: "nothing to do" and "something went wrong" stay distinguishable.
"""

from __future__ import annotations

from pathlib import Path


class DependencyError(Exception):
    """Base exception for all depresolve errors."""


class ConstructionError(DependencyError):
    """Raised when an item, source, or resolver cannot be constructed.

    Covers invalid item ids, a missing or wrong-typed graph source,
    selected ids that do not exist in the source, and duplicate
    selected ids.
    """


class SourceFormatError(ConstructionError):
    """Raised when a file-backed graph source cannot be read or parsed.

    Attributes:
        path: The file that failed to load.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class EmptyRequestError(DependencyError):
    """Raised when ``depends`` or ``schedule`` is called with no ids."""


class OrphanError(DependencyError):
    """Raised when a dependency id has no item in the source.

    Only raised when the resolver was built without ``ignore_orphans``.

    Attributes:
        item_id: The id that could not be found.
    """

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id!r} does not exist in the source")


class CyclicDependencyError(DependencyError):
    """Raised when the items being scheduled contain a dependency cycle.

    Ordered hierarchies forbid cycles; only the ordered resolver raises
    this.

    Attributes:
        cycle: The ids forming the cycle path, first id repeated at the
            end (e.g. ``["a", "b", "a"]``).
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(
            "Circular dependency detected: " + " -> ".join(self.cycle)
        )
