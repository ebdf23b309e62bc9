"""``depresolve depends <graph> <id>...`` -- List the other items an item needs.

Prints the transitive dependencies of the given ids in sorted order,
excluding the ids themselves and anything passed with ``--selected``.

Exit Codes:
    0 -- Dependencies listed (possibly none).
    1 -- An orphan dependency was found (see ``--ignore-orphans``).
    2 -- The graph or a selected id is invalid.
"""

from __future__ import annotations

import json
import sys

import click

from depresolve.cli.options import (
    EXIT_INVALID_INPUT,
    EXIT_OK,
    EXIT_RESOLUTION_FAILED,
    build_resolver,
    fail,
    resolver_options,
)
from depresolve.exceptions import ConstructionError, DependencyError


@click.command("depends")
@resolver_options
@click.argument("ids", nargs=-1, required=True)
def depends_command(
    graph: str,
    selected: tuple[str, ...],
    ignore_orphans: bool,
    invert: bool,
    output_format: str,
    ids: tuple[str, ...],
) -> None:
    """List every other item needed to satisfy the dependencies of IDS.

    With --invert, lists every item that depends on IDS instead.
    """
    try:
        resolver = build_resolver(graph, selected, ignore_orphans, invert, ordered=False)
    except ConstructionError as exc:
        fail(exc, EXIT_INVALID_INPUT, output_format)

    try:
        depends = resolver.depends(*ids)
    except DependencyError as exc:
        fail(exc, EXIT_RESOLUTION_FAILED, output_format)

    if output_format == "json":
        click.echo(json.dumps({"items": list(ids), "depends": depends}, indent=2))
    else:
        from depresolve.cli.output import print_depends
        print_depends(list(ids), depends)
    sys.exit(EXIT_OK)
