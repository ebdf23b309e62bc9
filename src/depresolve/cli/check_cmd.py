"""``depresolve check <graph>`` -- Verify the integrity of a graph.

Reports dependency ids with no matching item, and whether the unselected
items can be put in dependency order (i.e. contain no cycle).

Exit Codes:
    0 -- Graph is acyclic, and complete unless --ignore-orphans is given.
    1 -- A cycle, or missing dependencies without --ignore-orphans, were found.
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
from depresolve.exceptions import ConstructionError, CyclicDependencyError


@click.command("check")
@resolver_options
def check_command(
    graph: str,
    selected: tuple[str, ...],
    ignore_orphans: bool,
    invert: bool,
    output_format: str,
) -> None:
    """Check GRAPH for missing dependencies and dependency cycles.

    Missing dependencies are always listed. They fail the check unless
    --ignore-orphans is given, in which case only a cycle fails it.
    """
    try:
        resolver = build_resolver(graph, selected, True, invert)
    except ConstructionError as exc:
        fail(exc, EXIT_INVALID_INPUT, output_format)

    missing = resolver.source.missing_dependencies()
    cycle: list[str] | None = None
    try:
        resolver.schedule_all()
    except CyclicDependencyError as exc:
        cycle = exc.cycle

    ok = cycle is None and (ignore_orphans or not missing)
    if output_format == "json":
        click.echo(json.dumps({"ok": ok, "missing": missing, "cycle": cycle}, indent=2))
    else:
        from depresolve.cli.output import print_check_report
        print_check_report(missing, cycle, ignore_orphans)
    sys.exit(EXIT_OK if ok else EXIT_RESOLUTION_FAILED)
