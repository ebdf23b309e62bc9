"""Shared fixtures for depresolve tests."""

import pathlib

import pytest

from depresolve.sources import MappingSource

# The install-order example: b needs a, a needs core; this/that stand alone.
INSTALL_GRAPH = {
    "core": [],
    "a": ["core"],
    "b": ["a"],
    "this": [],
    "that": [],
}


@pytest.fixture
def install_source() -> MappingSource:
    """Source for the core/a/b/this/that install graph."""
    return MappingSource(INSTALL_GRAPH)


@pytest.fixture
def install_yaml(tmp_path: pathlib.Path) -> pathlib.Path:
    """Write the install graph as a YAML document."""
    path = tmp_path / "deps.yaml"
    path.write_text(
        "core:\n"
        "a: [core]\n"
        "b:\n"
        "  - a\n"
        "this: []\n"
        "that: []\n"
    )
    return path
