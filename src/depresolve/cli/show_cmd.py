"""``depresolve show <graph>`` -- List every item and its dependencies.

Exit Codes:
    0 -- Items listed.
    2 -- The graph or a selected id is invalid.
"""

from __future__ import annotations

import json
import sys

import click

from depresolve.cli.options import EXIT_INVALID_INPUT, EXIT_OK, build_resolver, fail, resolver_options
from depresolve.exceptions import ConstructionError


@click.command("show")
@resolver_options
def show_command(
    graph: str,
    selected: tuple[str, ...],
    ignore_orphans: bool,
    invert: bool,
    output_format: str,
) -> None:
    """Show every item in GRAPH with its dependencies."""
    try:
        resolver = build_resolver(graph, selected, ignore_orphans, invert)
    except ConstructionError as exc:
        fail(exc, EXIT_INVALID_INPUT, output_format)

    items = resolver.source.items()
    chosen = resolver.selected_list()
    if output_format == "json":
        click.echo(json.dumps({
            "items": {item.id: list(item.depends) for item in items},
            "selected": chosen,
        }, indent=2))
    else:
        from depresolve.cli.output import print_items
        print_items(items, chosen)
    sys.exit(EXIT_OK)
