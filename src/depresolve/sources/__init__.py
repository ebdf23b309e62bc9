"""Graph sources: in-memory mappings, flat files, YAML/JSON documents, inversion."""

from depresolve.core.dependency.source import GraphSource
from depresolve.sources.document import JsonSource, YamlSource
from depresolve.sources.file import FileSource
from depresolve.sources.invert import InvertedSource
from depresolve.sources.mapping import MappingSource
from depresolve.sources.registry import SourceRegistry, default_registry, load_source

__all__ = [
    "GraphSource",
    "MappingSource",
    "InvertedSource",
    "FileSource",
    "YamlSource",
    "JsonSource",
    "SourceRegistry",
    "default_registry",
    "load_source",
]
