"""Shared Click options and resolver construction for depresolve commands.

Every command takes a GRAPH path followed by the same resolver options,
so they are declared once here and applied with ``@resolver_options``.
"""

from __future__ import annotations

import json
import sys
from typing import Callable, NoReturn

import click

from depresolve.core.dependency import OrderedResolver, Resolver
from depresolve.exceptions import DependencyError
from depresolve.sources.registry import load_source

EXIT_OK = 0
EXIT_RESOLUTION_FAILED = 1
EXIT_INVALID_INPUT = 2


def resolver_options(func: Callable) -> Callable:
    """Attach GRAPH plus the selection/orphan/inversion options to a command."""
    func = click.option(
        "--format", "output_format",
        type=click.Choice(["text", "json"]),
        default="text",
        help="Output format (default: text).",
    )(func)
    func = click.option(
        "--invert",
        is_flag=True,
        default=False,
        help="Reverse every edge (resolve dependents instead of dependencies).",
    )(func)
    func = click.option(
        "--ignore-orphans",
        is_flag=True,
        default=False,
        help="Skip dependency ids that have no item instead of failing.",
    )(func)
    func = click.option(
        "--selected", "-s",
        multiple=True,
        metavar="ID",
        help="Item already handled; excluded from results. Repeatable.",
    )(func)
    func = click.argument("graph", type=click.Path(exists=True, dir_okay=False))(func)
    return func


def build_resolver(
    graph: str,
    selected: tuple[str, ...],
    ignore_orphans: bool,
    invert: bool,
    ordered: bool = True,
) -> Resolver:
    """Load GRAPH and build the requested resolver.

    Raises:
        ConstructionError: If the graph cannot be loaded or a selected id
            is invalid.
    """
    source = load_source(graph, invert=invert)
    cls = OrderedResolver if ordered else Resolver
    return cls(source, selected=list(selected), ignore_orphans=ignore_orphans)


def fail(exc: DependencyError, exit_code: int, output_format: str) -> NoReturn:
    """Report *exc* in the requested format and exit with *exit_code*."""
    if output_format == "json":
        payload: dict = {"error": str(exc), "type": type(exc).__name__}
        cycle = getattr(exc, "cycle", None)
        if cycle is not None:
            payload["cycle"] = cycle
        click.echo(json.dumps(payload))
    else:
        click.echo(f"Error: {exc}")
    sys.exit(exit_code)
