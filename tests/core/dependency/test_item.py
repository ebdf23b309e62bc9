"""Tests for the immutable Item value."""

from __future__ import annotations

import dataclasses

import pytest

from depresolve.core.dependency import Item
from depresolve.exceptions import ConstructionError, DependencyError


class TestItemConstruction:
    """Tests for Item creation and validation."""

    def test_item_without_dependencies(self) -> None:
        """An item may have no dependencies."""
        item = Item("core")
        assert item.id == "core"
        assert item.depends == ()

    def test_depends_preserves_order_and_duplicates(self) -> None:
        """Dependency ids are stored verbatim, duplicates included."""
        item = Item.of("app", ["db", "cache", "db"])
        assert item.depends == ("db", "cache", "db")

    def test_list_dependencies_are_frozen_to_tuple(self) -> None:
        """A list passed directly is stored as a tuple."""
        item = Item("app", ["db"])  # type: ignore[arg-type]
        assert item.depends == ("db",)

    def test_dependencies_may_name_unknown_ids(self) -> None:
        """Items do not check whether their dependencies exist."""
        assert Item.of("a", ["nowhere"]).depends == ("nowhere",)

    @pytest.mark.parametrize("bad_id", ["", None, 42, ["a"]])
    def test_invalid_id_rejected(self, bad_id: object) -> None:
        """Empty, null, or non-string ids fail construction."""
        with pytest.raises(ConstructionError):
            Item(bad_id)  # type: ignore[arg-type]

    def test_invalid_dependency_id_rejected(self) -> None:
        """An empty dependency id fails construction."""
        with pytest.raises(ConstructionError, match="Invalid dependency id"):
            Item.of("a", ["b", ""])

    def test_string_dependencies_rejected(self) -> None:
        """A bare string is not mistaken for a list of single-letter ids."""
        with pytest.raises(ConstructionError, match="not a string"):
            Item.of("a", "bc")
        with pytest.raises(ConstructionError, match="not a string"):
            Item("a", "bc")  # type: ignore[arg-type]

    def test_generator_dependencies_accepted(self) -> None:
        assert Item.of("a", (d for d in ["b", "c"])).depends == ("b", "c")

    def test_construction_error_is_dependency_error(self) -> None:
        """Callers can catch every failure through the base class."""
        with pytest.raises(DependencyError):
            Item("")


class TestItemImmutability:
    """Items cannot be changed once built."""

    def test_id_cannot_be_reassigned(self) -> None:
        item = Item("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.id = "b"  # type: ignore[misc]

    def test_equal_items_compare_equal(self) -> None:
        """Items are values: same id and dependencies means equal."""
        assert Item.of("a", ["b"]) == Item("a", ("b",))
        assert hash(Item.of("a", ["b"])) == hash(Item("a", ("b",)))
