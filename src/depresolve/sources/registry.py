"""Source registry for loading a graph from a file path.

The ``SourceRegistry`` maps file suffixes to source classes so the CLI
(and library callers) can turn any supported file into a ``GraphSource``
without naming the format. Files whose suffix is not registered fall back
to the flat-text ``FileSource``.

``default_registry()`` pre-registers the built-in formats:

1. ``.yaml`` / ``.yml`` -- ``YamlSource``
2. ``.json`` -- ``JsonSource``
3. anything else -- ``FileSource``
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import SourceFormatError
from depresolve.sources.document import JsonSource, YamlSource
from depresolve.sources.file import FileSource
from depresolve.sources.invert import InvertedSource

SourceFactory = Callable[[Path], GraphSource]


class SourceRegistry:
    """Registry of source factories keyed by lower-case file suffix.

    Attributes:
        loaders: Suffix (including the dot) -> factory.
        fallback: Factory used when no suffix matches.
    """

    def __init__(self, fallback: SourceFactory = FileSource) -> None:
        self.loaders: dict[str, SourceFactory] = {}
        self.fallback = fallback

    def register(self, suffix: str, factory: SourceFactory) -> None:
        """Register *factory* for files ending in *suffix*.

        A later registration for the same suffix replaces the earlier one.
        """
        if not suffix.startswith("."):
            suffix = "." + suffix
        self.loaders[suffix.lower()] = factory

    def factory_for(self, path: Path) -> SourceFactory:
        return self.loaders.get(path.suffix.lower(), self.fallback)

    def load(self, path: Path | str, invert: bool = False) -> GraphSource:
        """Build and load a source for *path*.

        The source is loaded eagerly so format errors surface here rather
        than on the first query.

        Args:
            path: File to read.
            invert: Wrap the result in an ``InvertedSource``.

        Raises:
            SourceFormatError: If the file is missing or malformed.
            ConstructionError: If the items are invalid (e.g. duplicate ids).
        """
        target = Path(path)
        if not target.is_file():
            raise SourceFormatError("no such file", target)
        source = self.factory_for(target)(target)
        source.load()
        if invert:
            return InvertedSource(source)
        return source


def default_registry() -> SourceRegistry:
    """Create a SourceRegistry pre-loaded with the built-in formats."""
    registry = SourceRegistry(fallback=FileSource)
    registry.register(".yaml", YamlSource)
    registry.register(".yml", YamlSource)
    registry.register(".json", JsonSource)
    return registry


def load_source(path: Path | str, invert: bool = False) -> GraphSource:
    """Load *path* with the default registry."""
    return default_registry().load(path, invert=invert)
