"""depresolve CLI -- Dependency closures and install-order schedules.

Entry point for the ``depresolve`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    depends  -- List the other items an item needs.
    schedule -- Print the order to act on items (dependency order by default).
    check    -- Report missing dependencies and cycles.
    show     -- List every item and its dependencies.

Usage::

    depresolve depends deps.yaml b
    depresolve schedule deps.yaml b --selected this --selected that
    depresolve schedule deps.txt --all --unordered
    depresolve schedule deps.yaml core --invert     # what is affected by core
    depresolve check deps.json

Every option can also be set from the environment, e.g.
``DEPRESOLVE_SCHEDULE_IGNORE_ORPHANS=1``.
"""

from __future__ import annotations

import logging

import click

from depresolve import __version__
from depresolve.cli.check_cmd import check_command
from depresolve.cli.depends_cmd import depends_command
from depresolve.cli.schedule_cmd import schedule_command
from depresolve.cli.show_cmd import show_command


@click.group(context_settings={"auto_envvar_prefix": "DEPRESOLVE"})
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log loading and resolution details to stderr.")
def cli(verbose: bool) -> None:
    """depresolve: Resolve dependency closures and schedules for named items.

    GRAPH may be a YAML or JSON mapping of id -> dependency ids, or a flat
    text file with one "id dep dep ..." line per item.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# Register all subcommands
cli.add_command(depends_command)
cli.add_command(schedule_command)
cli.add_command(check_command)
cli.add_command(show_command)
