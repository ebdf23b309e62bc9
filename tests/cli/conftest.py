"""Shared fixtures for CLI tests.

Provides temporary graph files in each supported format, plus graphs with
orphans and cycles for the failure paths.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def install_json(tmp_path: Path) -> Path:
    """The core/a/b/this/that install graph as JSON."""
    path = tmp_path / "deps.json"
    path.write_text(json.dumps({
        "core": [],
        "a": ["core"],
        "b": ["a"],
        "this": [],
        "that": [],
    }))
    return path


@pytest.fixture
def install_txt(tmp_path: Path) -> Path:
    """The install graph as a flat text file."""
    path = tmp_path / "deps.txt"
    path.write_text(
        "# id  depends on\n"
        "core\n"
        "a: core\n"
        "b: a\n"
        "this\n"
        "that\n"
    )
    return path


@pytest.fixture
def orphan_yaml(tmp_path: Path) -> Path:
    """A graph where ``a`` depends on a missing ``zzz``."""
    path = tmp_path / "orphan.yaml"
    path.write_text("a: [zzz, b]\nb: []\n")
    return path


@pytest.fixture
def cyclic_yaml(tmp_path: Path) -> Path:
    """A graph where ``a`` and ``b`` depend on each other."""
    path = tmp_path / "cyclic.yaml"
    path.write_text("a: [b]\nb: [a]\nc: []\n")
    return path
