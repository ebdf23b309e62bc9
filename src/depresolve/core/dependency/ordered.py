"""Ordered resolver: schedules that respect dependency order.

If A depends on B, B is placed before A. The working set is exactly the
one the base ``Resolver.schedule`` produces (seeds plus closure, minus
selected items); only its order changes. ``depends`` stays sorted.

Ordering is an iterative depth-first topological sort with three states
per item (unvisited, in progress, done). Roots and dependencies are both
visited in ascending id order, so the same input always yields the same
schedule. Reaching an in-progress item means the working set contains a
cycle, which an ordered hierarchy cannot express.
"""

from __future__ import annotations

from depresolve.core.dependency.resolver import Resolver
from depresolve.exceptions import CyclicDependencyError

_IN_PROGRESS, _DONE = 1, 2


class OrderedResolver(Resolver):
    """Resolver whose schedules are in dependency (install) order.

    Construction, ``depends``, selection, and orphan handling are inherited
    unchanged from ``Resolver``.
    """

    def _edges(self, item_id: str, working: set[str]) -> list[str]:
        """Dependencies of *item_id* that are part of the working set, sorted."""
        item = self._source.item(item_id)
        if item is None:
            return []
        return sorted({dep for dep in item.depends if dep in working})

    def _order(self, working: set[str]) -> list[str]:
        """Linearise *working* so every item follows its dependencies.

        Raises:
            CyclicDependencyError: If the working set contains a cycle.
        """
        state: dict[str, int] = {}
        order: list[str] = []

        for root in sorted(working):
            if root in state:
                continue
            state[root] = _IN_PROGRESS
            stack = [(root, iter(self._edges(root, working)))]

            while stack:
                node, pending = stack[-1]
                for dep in pending:
                    mark = state.get(dep)
                    if mark == _DONE:
                        continue
                    if mark == _IN_PROGRESS:
                        path = [entry for entry, _ in stack]
                        raise CyclicDependencyError(path[path.index(dep):] + [dep])
                    state[dep] = _IN_PROGRESS
                    stack.append((dep, iter(self._edges(dep, working))))
                    break
                else:
                    stack.pop()
                    state[node] = _DONE
                    order.append(node)

        return order

    def schedule(self, *ids: str) -> list[str]:
        """Return the items to act on for *ids*, in dependency order.

        Raises:
            EmptyRequestError: If no ids are given.
            OrphanError: If a missing id is reached without ``ignore_orphans``.
            CyclicDependencyError: If the items to schedule form a cycle.
        """
        working = self._working_set(ids)
        return self._order(working)
