"""``depresolve schedule <graph> [<id>...]`` -- Compute an action schedule.

Prints the items to act on, the given ids included, in dependency order:
every item appears after the items it depends on. ``--unordered`` falls
back to sorted order, which also tolerates cycles. ``--all`` schedules
every item not passed with ``--selected``.

Exit Codes:
    0 -- Schedule printed (possibly empty).
    1 -- Resolution failed (orphan dependency or dependency cycle).
    2 -- Invalid input (bad graph, unknown selected id, no ids given).
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


@click.command("schedule")
@resolver_options
@click.argument("ids", nargs=-1)
@click.option("--all", "schedule_all", is_flag=True, default=False,
              help="Schedule every unselected item in the graph.")
@click.option("--unordered", is_flag=True, default=False,
              help="Sort the schedule by id instead of dependency order.")
def schedule_command(
    graph: str,
    selected: tuple[str, ...],
    ignore_orphans: bool,
    invert: bool,
    output_format: str,
    ids: tuple[str, ...],
    schedule_all: bool,
    unordered: bool,
) -> None:
    """Print the order in which to act on IDS and their dependencies."""
    if not ids and not schedule_all:
        raise click.UsageError("Give at least one ID or use --all.")
    if ids and schedule_all:
        raise click.UsageError("--all cannot be combined with explicit IDs.")

    try:
        resolver = build_resolver(
            graph, selected, ignore_orphans, invert, ordered=not unordered,
        )
    except ConstructionError as exc:
        fail(exc, EXIT_INVALID_INPUT, output_format)

    try:
        schedule = resolver.schedule_all() if schedule_all else resolver.schedule(*ids)
    except DependencyError as exc:
        fail(exc, EXIT_RESOLUTION_FAILED, output_format)

    if output_format == "json":
        click.echo(json.dumps({
            "ordered": not unordered,
            "selected": resolver.selected_list(),
            "schedule": schedule,
        }, indent=2))
    else:
        from depresolve.cli.output import print_schedule
        print_schedule(schedule, ordered=not unordered)
    sys.exit(EXIT_OK)
