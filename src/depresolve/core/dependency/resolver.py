"""Base dependency resolver: transitive closures and unordered schedules.

The ``Resolver`` answers two questions over a read-only graph source:

- ``depends(ids)``: which OTHER items must also be handled?
- ``schedule(ids)``: which items must be handled, seeds included?

Both results exclude items already marked as *selected* (handled
elsewhere) and are returned in ascending lexical order. This base class
does not order by dependency; see ``OrderedResolver`` for that.

Non-ordered hierarchies may contain cycles. Visitation is memoised per
call, so traversal always terminates; the closure of a cyclic graph is
simply every reachable id other than the seeds.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Iterable

from depresolve.core.dependency.item import Item
from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import ConstructionError, EmptyRequestError, OrphanError

logger = logging.getLogger(__name__)


class Resolver:
    """Unordered dependency resolver over a ``GraphSource``.

    Args:
        source: The graph source holding every item.
        selected: Ids already handled. Each must exist in the source and
            appear only once. A bare string is rejected rather than read
            as a sequence of single-character ids.
        ignore_orphans: When True, dependency ids with no item in the
            source are skipped instead of raising ``OrphanError``.

    Raises:
        ConstructionError: If the source is not a ``GraphSource``, or a
            selected id is unknown or duplicated.

    Thread safety: queries may run concurrently. ``select()`` takes the
    resolver's lock, so it never interleaves with a query reading the
    selected set.
    """

    def __init__(
        self,
        source: GraphSource,
        selected: Iterable[str] | None = None,
        ignore_orphans: bool = False,
    ) -> None:
        if not isinstance(source, GraphSource):
            raise ConstructionError(
                f"source must be a GraphSource, got {type(source).__name__}"
            )
        self._source = source
        self._ignore_orphans = bool(ignore_orphans)
        self._lock = threading.RLock()
        self._selected: set[str] = set()

        if isinstance(selected, str):
            raise ConstructionError(
                f"selected must be a list of ids, not the string {selected!r}"
            )
        for item_id in selected or ():
            if source.item(item_id) is None:
                raise ConstructionError(
                    f"Selected item {item_id!r} does not exist in the source"
                )
            if item_id in self._selected:
                raise ConstructionError(f"Duplicate selected item {item_id!r}")
            self._selected.add(item_id)

    # -- accessors -----------------------------------------------------------

    @property
    def source(self) -> GraphSource:
        """The graph source this resolver reads from."""
        return self._source

    @property
    def ignore_orphans(self) -> bool:
        return self._ignore_orphans

    def item(self, item_id: str) -> Item | None:
        """Return the item for *item_id*, or None if the source lacks it."""
        return self._source.item(item_id)

    def selected(self, item_id: str) -> bool | None:
        """Report whether *item_id* is selected.

        Returns:
            True if selected, False if not, None if the id does not exist
            in the source.
        """
        if self._source.item(item_id) is None:
            return None
        with self._lock:
            return item_id in self._selected

    def selected_list(self) -> list[str]:
        """Return the selected ids in ascending order."""
        with self._lock:
            return sorted(self._selected)

    def select(self, *ids: str) -> list[str]:
        """Mark additional items as selected.

        Ids that are already selected are accepted and left alone. The
        whole call is validated before anything changes.

        Args:
            *ids: Item ids to mark as handled.

        Returns:
            The ids newly added, in ascending order.

        Raises:
            ConstructionError: If any id is not a string or does not exist in
                the source.
        """
        for item_id in ids:
            if not isinstance(item_id, str):
                raise ConstructionError(f"Selected id must be a string, got {item_id!r}")
            if self._source.item(item_id) is None:
                raise ConstructionError(
                    f"Selected item {item_id!r} does not exist in the source"
                )
        with self._lock:
            added = sorted(set(ids) - self._selected)
            self._selected.update(added)
        if added:
            logger.debug("Marked %d item(s) selected: %s", len(added), ", ".join(added))
        return added

    # -- algorithms ----------------------------------------------------------

    def _snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._selected)

    def _closure(self, seeds: tuple[str, ...]) -> set[str]:
        """Collect every id reachable from *seeds*, seeds themselves excluded.

        Raises:
            EmptyRequestError: If *seeds* is empty.
            OrphanError: If an unknown id is reached without ``ignore_orphans``.
        """
        if not seeds:
            raise EmptyRequestError("At least one item id is required")

        seed_set = set(seeds)
        found: set[str] = set()
        checked: set[str] = set()
        queue: deque[str] = deque(seeds)

        while queue:
            item_id = queue.popleft()
            item = self._source.item(item_id)
            if item is None:
                if self._ignore_orphans:
                    logger.debug("Ignoring orphan %r", item_id)
                    continue
                raise OrphanError(item_id)
            if item_id in checked:
                continue
            checked.add(item_id)
            queue.extend(item.depends)
            if item_id not in seed_set:
                found.add(item_id)

        return found

    def _working_set(self, seeds: tuple[str, ...]) -> set[str]:
        """Return the seeds plus their closure, minus selected items."""
        selected = self._snapshot()
        return (self._closure(seeds) | set(seeds)) - selected

    def depends(self, *ids: str) -> list[str]:
        """Return the other items needed to satisfy the dependencies of *ids*.

        Args:
            *ids: One or more seed item ids.

        Returns:
            Sorted, de-duplicated ids. Excludes the seeds and anything
            already selected. Empty if nothing else is needed.

        Raises:
            EmptyRequestError: If no ids are given.
            OrphanError: If a missing id is reached without ``ignore_orphans``.
        """
        selected = self._snapshot()
        return sorted(self._closure(ids) - selected)

    def schedule(self, *ids: str) -> list[str]:
        """Return the items to act on for *ids*, seeds included.

        The base resolver returns them in ascending lexical order, which
        makes progress through a run easy to follow in logs.

        Raises:
            EmptyRequestError: If no ids are given.
            OrphanError: If a missing id is reached without ``ignore_orphans``.
        """
        working = self._working_set(ids)
        return sorted(working)

    def schedule_all(self) -> list[str]:
        """Return a schedule covering every not-yet-selected item in the source.

        An empty source yields an empty schedule.
        """
        ids = tuple(item.id for item in self._source.items())
        if not ids:
            return []
        return self.schedule(*ids)
