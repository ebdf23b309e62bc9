"""Property-based tests for resolver invariants.

Verifies over randomly generated graphs:
- Permutation: an ordered schedule holds exactly the closure plus seeds,
  minus selected items, each once
- Dependency order: every dependency in the schedule precedes its dependents
- Seed exclusion: ``depends`` never returns its own inputs, even on cycles
- Determinism: repeated calls give identical schedules
- Agreement: ordered and unordered schedules contain the same ids
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from depresolve.core.dependency import OrderedResolver, Resolver
from depresolve.sources import MappingSource


# ---------------------------------------------------------------------------
# Strategies for generating random graphs
# ---------------------------------------------------------------------------


@st.composite
def acyclic_graph(draw: st.DrawFn) -> dict[str, list[str]]:
    """Generate a DAG: each item may only depend on lower-numbered items."""
    size = draw(st.integers(min_value=1, max_value=8))
    names = [f"item-{i}" for i in range(size)]
    graph: dict[str, list[str]] = {}
    for i, name in enumerate(names):
        if i == 0:
            graph[name] = []
        else:
            graph[name] = draw(st.lists(st.sampled_from(names[:i]), max_size=3))
    return graph


@st.composite
def any_graph(draw: st.DrawFn) -> dict[str, list[str]]:
    """Generate a graph whose edges may form cycles, self-loops included."""
    size = draw(st.integers(min_value=1, max_value=6))
    names = [f"item-{i}" for i in range(size)]
    return {
        name: draw(st.lists(st.sampled_from(names), max_size=3))
        for name in names
    }


@st.composite
def scenario(draw: st.DrawFn, graphs=acyclic_graph()):
    """Draw a graph plus a selection and a non-empty seed list from it."""
    graph = draw(graphs)
    names = sorted(graph)
    selected = draw(st.lists(st.sampled_from(names), unique=True, max_size=3))
    seeds = draw(st.lists(st.sampled_from(names), min_size=1, max_size=3))
    return graph, selected, seeds


def _reachable_within(graph: dict[str, list[str]], start: str, allowed: set[str]) -> set[str]:
    """Ids reachable from *start* through edges whose targets are in *allowed*."""
    seen: set[str] = set()
    stack = [dep for dep in graph[start] if dep in allowed]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        stack.extend(dep for dep in graph[node] if dep in allowed)
    return seen


# ---------------------------------------------------------------------------
# Ordered schedules
# ---------------------------------------------------------------------------


class TestOrderedSchedule:
    """Invariants of OrderedResolver.schedule on acyclic graphs."""

    @given(case=scenario())
    @settings(max_examples=100)
    def test_schedule_is_permutation_of_working_set(self, case) -> None:
        graph, selected, seeds = case
        resolver = OrderedResolver(MappingSource(graph), selected=selected)
        schedule = resolver.schedule(*seeds)
        expected = (set(resolver.depends(*seeds)) | set(seeds)) - set(selected)
        assert len(schedule) == len(set(schedule))
        assert set(schedule) == expected

    @given(case=scenario())
    @settings(max_examples=100)
    def test_dependencies_come_first(self, case) -> None:
        graph, selected, seeds = case
        resolver = OrderedResolver(MappingSource(graph), selected=selected)
        schedule = resolver.schedule(*seeds)
        position = {item_id: i for i, item_id in enumerate(schedule)}
        working = set(schedule)
        for item_id in schedule:
            for dep in _reachable_within(graph, item_id, working):
                assert position[dep] < position[item_id]

    @given(case=scenario())
    @settings(max_examples=50)
    def test_schedule_is_deterministic(self, case) -> None:
        graph, selected, seeds = case
        first = OrderedResolver(MappingSource(graph), selected=selected).schedule(*seeds)
        second = OrderedResolver(MappingSource(dict(reversed(list(graph.items())))),
                                 selected=selected).schedule(*seeds)
        assert first == second

    @given(case=scenario())
    @settings(max_examples=50)
    def test_ordered_and_unordered_agree_on_contents(self, case) -> None:
        graph, selected, seeds = case
        source = MappingSource(graph)
        ordered = OrderedResolver(source, selected=selected).schedule(*seeds)
        unordered = Resolver(source, selected=selected).schedule(*seeds)
        assert sorted(ordered) == unordered


# ---------------------------------------------------------------------------
# Base resolver on arbitrary (possibly cyclic) graphs
# ---------------------------------------------------------------------------


class TestBaseResolver:
    """Invariants of the base Resolver, which tolerates cycles."""

    @given(case=scenario(graphs=any_graph()))
    @settings(max_examples=100)
    def test_depends_excludes_seeds_and_selected(self, case) -> None:
        graph, selected, seeds = case
        depends = Resolver(MappingSource(graph), selected=selected).depends(*seeds)
        assert not set(depends) & set(seeds)
        assert not set(depends) & set(selected)
        assert depends == sorted(set(depends))

    @given(case=scenario(graphs=any_graph()))
    @settings(max_examples=50)
    def test_schedule_idempotent(self, case) -> None:
        graph, selected, seeds = case
        resolver = Resolver(MappingSource(graph), selected=selected)
        assert resolver.schedule(*seeds) == resolver.schedule(*seeds)

    @given(case=scenario(graphs=any_graph()))
    @settings(max_examples=50)
    def test_selected_list_sorted_unique(self, case) -> None:
        graph, selected, _ = case
        listed = Resolver(MappingSource(graph), selected=selected).selected_list()
        assert listed == sorted(set(selected))
