"""CLI for inspecting an exported inventory snapshot."""

import json
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from inventory_board.config import configure_logging, get_settings
from inventory_board.core.models import Item, ItemView
from inventory_board.core.view_model import InventoryViewModel

app = typer.Typer(
    name="inventory-board",
    help="Inventory Board CLI - inspect per-location inventory lists",
    add_completion=False,
)
console = Console()

_items_adapter = TypeAdapter(list[Item])


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Configure logging before any command runs."""
    configure_logging(log_level)


def load_snapshot(path: Path) -> list[Item]:
    """Load a JSON array of item documents exported from the store."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]✗ Cannot read snapshot: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]✗ Snapshot is not valid JSON: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        return _items_adapter.validate_python(raw)
    except ValidationError as e:
        console.print(f"[red]✗ Snapshot must be a list of item documents: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _location_table(label: str, views: list[ItemView]) -> Table:
    table = Table(title=label, title_justify="left")
    table.add_column("Name")
    table.add_column("Amount", justify="right")
    table.add_column("Type")
    table.add_column("Low <", justify="right")
    table.add_column("Status")

    for view in views:
        item = view.item
        amount = "?" if item.amount is None else str(item.amount)
        status = "[bold red]Low stock![/bold red]" if view.low_stock else ""
        style = "red" if view.low_stock else None
        table.add_row(
            escape(item.name),
            amount,
            view.type_label,
            str(view.effective_threshold),
            status,
            style=style,
        )
    return table


@app.command()
def locations():
    """List configured locations and the default low-stock threshold."""
    board = get_settings().board
    console.print(Panel.fit(
        "\n".join(f"[bold]{loc.id}[/bold]: {loc.label}" for loc in board.location_list)
        + f"\n\n[bold]Default threshold:[/bold] {board.default_low_stock_threshold}",
        title="Locations",
    ))


@app.command()
def show(
    snapshot: Path = typer.Argument(..., help="JSON file with exported item documents"),
    location: str = typer.Option(None, "--location", "-l", help="Show only this location"),
):
    """Show the ordered item list of every location."""
    board = get_settings().board
    view_model = InventoryViewModel(board.location_ids, board.default_low_stock_threshold)
    items = load_snapshot(snapshot)

    if location is not None and location not in view_model.locations:
        console.print(f"[red]✗ Unknown location: {location}[/red]")
        raise typer.Exit(1)

    lists = view_model.board(items)
    for loc in board.location_list:
        if location is not None and loc.id != location:
            continue
        views = lists[loc.id]
        if not views:
            console.print(f"[bold]{loc.label}[/bold]\n  [dim]No items yet.[/dim]\n")
            continue
        console.print(_location_table(loc.label, views))

    summaries = view_model.summarize(items)
    lines = [
        f"[bold]{board.locations[s.location]}:[/bold] {s.total} items"
        + (f", [red]{s.low_stock} low[/red]" if s.low_stock else "")
        for s in summaries
        if location is None or s.location == location
    ]
    shown = sum(s.total for s in summaries)
    if location is None and shown < len(items):
        lines.append(f"[yellow]{len(items) - shown} items at unknown locations[/yellow]")
    console.print(Panel.fit("\n".join(lines), title="Summary"))


@app.command()
def check(
    snapshot: Path = typer.Argument(..., help="JSON file with exported item documents"),
):
    """List low-stock supplies. Exits with code 1 if any are found."""
    board = get_settings().board
    view_model = InventoryViewModel(board.location_ids, board.default_low_stock_threshold)
    items = load_snapshot(snapshot)

    found = 0
    for location_id, views in view_model.board(items).items():
        low = [view for view in views if view.low_stock]
        if not low:
            continue
        console.print(f"[bold]{board.locations[location_id]}[/bold]")
        for view in low:
            console.print(
                f"  [red]•[/red] {escape(view.item.name)}: {view.item.amount} "
                f"(low < {view.effective_threshold})"
            )
        found += len(low)

    if found:
        console.print(f"\n[red]✗ {found} items low on stock[/red]")
        raise typer.Exit(1)

    console.print("[green]✓ No items low on stock[/green]")


if __name__ == "__main__":
    app()
