"""Graph sources loaded from structured documents (YAML or JSON).

The document's top level maps each item id to its list of dependency
ids. ``null`` (or an empty value) means no dependencies::

    core:
    a: [core]
    b:
      - a

The same shape in JSON is ``{"core": [], "a": ["core"], "b": ["a"]}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from depresolve.core.dependency.item import Item
from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import ConstructionError, SourceFormatError


def _as_id(value: Any, path: Path | None) -> str:
    # YAML reads bare 1.10 as the float 1.1 and 010 as 8; the text is gone.
    if isinstance(value, (bool, int, float)):
        raise SourceFormatError(
            f"id {value!r} was read as a {type(value).__name__}; quote it to keep it as text",
            path,
        )
    return value


def items_from_data(data: Any, path: Path | None = None) -> list[Item]:
    """Convert a decoded YAML/JSON object into items.

    Raises:
        SourceFormatError: If *data* is not a mapping of id -> list of ids,
            or an id was decoded as a number or boolean.
    """
    if data is None:
        return []
    if not isinstance(data, dict):
        raise SourceFormatError(
            f"top level must be a mapping of id -> dependencies, got {type(data).__name__}",
            path,
        )
    items: list[Item] = []
    for item_id, deps in data.items():
        if deps is None:
            deps = []
        if not isinstance(deps, list):
            raise SourceFormatError(
                f"dependencies of {item_id!r} must be a list, got {type(deps).__name__}",
                path,
            )
        try:
            items.append(Item(_as_id(item_id, path), tuple(_as_id(d, path) for d in deps)))
        except SourceFormatError:
            raise
        except ConstructionError as exc:
            raise SourceFormatError(str(exc), path) from exc
    return items


class _DocumentSource(GraphSource):
    """Shared file handling for document-backed sources."""

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)

    def _decode(self, raw: str) -> Any:
        raise NotImplementedError

    def _load_items(self) -> list[Item]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceFormatError(f"cannot read file: {exc}", self.path) from exc
        return items_from_data(self._decode(raw), self.path)


class YamlSource(_DocumentSource):
    """Source reading items from a YAML file via ``yaml.safe_load``."""

    def _decode(self, raw: str) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise SourceFormatError(f"invalid YAML: {exc}", self.path) from exc


class JsonSource(_DocumentSource):
    """Source reading items from a JSON object."""

    def _decode(self, raw: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SourceFormatError(f"invalid JSON: {exc}", self.path) from exc
