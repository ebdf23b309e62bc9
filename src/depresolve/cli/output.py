"""Rich output formatting helpers for the depresolve CLI.

Provides consistent terminal output for closures, schedules, graph
listings, and integrity reports.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from depresolve.core.dependency import Item

console = Console()


def print_depends(seeds: list[str], depends: list[str]) -> None:
    """Print the other items needed by *seeds*."""
    label = ", ".join(seeds)
    if not depends:
        console.print(f"[dim]Nothing else to select for {label}.[/dim]")
        return
    console.print(f"Selecting [bold]{label}[/bold] also selects:")
    for item_id in depends:
        console.print(f"  {item_id}")


def print_schedule(schedule: list[str], ordered: bool) -> None:
    """Print a schedule as a numbered table.

    Args:
        schedule: Item ids in the order they should be acted on.
        ordered: Whether the order respects dependencies (else lexical).
    """
    if not schedule:
        console.print("[dim]Nothing to schedule.[/dim]")
        return
    title = "Schedule (dependency order)" if ordered else "Schedule (sorted)"
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Step", justify="right")
    table.add_column("Item", style="bold")
    for step, item_id in enumerate(schedule, start=1):
        table.add_row(str(step), item_id)
    console.print(table)


def print_items(items: list[Item], selected: list[str]) -> None:
    """Print every item with its dependencies and selection state."""
    if not items:
        console.print("[dim]The graph contains no items.[/dim]")
        return
    chosen = set(selected)
    table = Table(title="Items", show_header=True, header_style="bold")
    table.add_column("Item", style="bold")
    table.add_column("Depends On")
    table.add_column("Selected", justify="center")
    for item in items:
        mark = Text("yes", style="green") if item.id in chosen else Text("-", style="dim")
        table.add_row(item.id, ", ".join(item.depends) or "-", mark)
    console.print(table)


def print_check_report(
    missing: list[str],
    cycle: list[str] | None,
    ignore_orphans: bool = False,
) -> None:
    """Print the result of a graph integrity check.

    With *ignore_orphans*, missing dependencies are listed as warnings
    and only a cycle marks the graph as failing.
    """
    if not missing and cycle is None:
        console.print(Panel("[bold green]Graph is complete and acyclic[/bold green]",
                            title="Graph Check"))
        return
    if cycle is None and ignore_orphans:
        console.print(Panel("[bold yellow]Graph is acyclic; missing dependencies ignored[/bold yellow]",
                            title="Graph Check"))
        for item_id in missing:
            console.print(f"  [yellow]- missing dependency: {item_id}[/yellow]")
        return
    console.print(Panel("[bold red]Graph has problems[/bold red]", title="Graph Check"))
    for item_id in missing:
        console.print(f"  [red]- missing dependency: {item_id}[/red]")
    if cycle is not None:
        console.print(f"  [red]- cycle: {' -> '.join(cycle)}[/red]")
