"""Command-line interface for momentum.

Commands:
- momentum gift <event_type> <relationship>
- momentum parse-date <text>
- momentum task add|list|done|stats
- momentum event add|list|stats
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from momentum import __logo__, __version__
from momentum.config.loader import load_config
from momentum.errors import StoreError
from momentum.gift import recommend
from momentum.models import (
    EventContact,
    Priority,
    Relationship,
    SocialEventCreateInput,
    TaskCategory,
    TaskCreateInput,
)
from momentum.query import QueryOptions
from momentum.store.factory import Stores, create_stores
from momentum.utils.date_parser import parse_date
from momentum.utils.logging import configure_logging

console = Console()

app = typer.Typer(name="momentum", help=f"{__logo__} momentum - tasks and social events")
task_app = typer.Typer(help="Manage tasks")
event_app = typer.Typer(help="Manage social events")
app.add_typer(task_app, name="task")
app.add_typer(event_app, name="event")

_state = {"data_dir": None}


@app.callback()
def main(
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Override the storage directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """momentum command-line interface."""
    _state["data_dir"] = data_dir
    configure_logging(load_config().logging, verbose=verbose)


async def _open_stores() -> Stores:
    config = load_config()
    if _state["data_dir"] is not None:
        config.storage.data_dir = str(_state["data_dir"])
    stores = create_stores(config)
    await stores.load_all()
    return stores


def _run(coro):
    try:
        return asyncio.run(coro)
    except StoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _parse_when(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        parsed = parse_date(value)
        if parsed is None:
            console.print(f"[red]Could not understand date: {value}[/red]")
            raise typer.Exit(1)
        return datetime.combine(parsed.to_date(), datetime.min.time())


def _fmt(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


@app.command()
def version():
    """Show version."""
    console.print(f"{__logo__} momentum v{__version__}")


@app.command()
def gift(
    event_type: str = typer.Argument(..., help="wedding, funeral, birthday..."),
    relationship: str = typer.Argument(..., help="family, friend, colleague..."),
):
    """Suggest a gift amount."""
    amount = recommend(event_type, relationship)
    console.print(f"Recommended amount: [bold green]{amount:,}[/bold green]")


@app.command("parse-date")
def parse_date_command(text: str = typer.Argument(..., help="Text containing a date")):
    """Extract a date from text."""
    parsed = parse_date(text)
    if parsed is None:
        console.print("[yellow]No date found[/yellow]")
        return
    console.print(f"{parsed.iso_date} (from '{parsed.raw_text}', confidence {parsed.confidence:.2f})")


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

@task_app.command("add")
def task_add(
    title: str = typer.Argument(...),
    priority: Priority = typer.Option(Priority.MEDIUM, "--priority", "-p"),
    category: TaskCategory = typer.Option(TaskCategory.OTHER, "--category", "-c"),
    deadline: Optional[str] = typer.Option(None, "--deadline", "-d", help="ISO date or text like '3월 5일'"),
):
    """Add a task."""
    when = _parse_when(deadline)

    async def _add():
        stores = await _open_stores()
        return await stores.tasks.add(
            TaskCreateInput(title=title, priority=priority, category=category, deadline=when)
        )

    task = _run(_add())
    console.print(f"[green]✓[/green] Added task {task.id[:8]}: {task.title}")


@task_app.command("list")
def task_list(
    status: Optional[str] = typer.Option(None, "--status", "-s"),
    priority: Optional[str] = typer.Option(None, "--priority", "-p"),
    search: Optional[str] = typer.Option(None, "--search"),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", help="createdAt, deadline, priority"),
    order: Optional[str] = typer.Option(None, "--order", help="asc or desc"),
):
    """List tasks."""
    async def _list():
        stores = await _open_stores()
        return stores.tasks.query(
            QueryOptions(status=status, priority=priority, search=search, sort_by=sort_by, sort_order=order)
        )

    try:
        tasks = _run(_list())
    except ValueError as e:
        console.print(f"[red]Invalid option: {e}[/red]")
        raise typer.Exit(1)

    if not tasks:
        console.print("[dim]No tasks.[/dim]")
        return

    table = Table(title="Tasks")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Deadline")
    for task in tasks:
        table.add_row(task.id[:8], task.title, task.status.value, task.priority.value, _fmt(task.deadline))
    console.print(table)


def _resolve_task_id(stores: Stores, prefix: str) -> str:
    matches = [t.id for t in stores.tasks.items if t.id.startswith(prefix)]
    if len(matches) != 1:
        console.print(f"[red]{'No' if not matches else 'Ambiguous'} task matching '{prefix}'[/red]")
        raise typer.Exit(1)
    return matches[0]


@task_app.command("done")
def task_done(task_id: str = typer.Argument(..., help="Task ID (prefix ok)")):
    """Toggle a task between active and completed."""
    async def _toggle():
        stores = await _open_stores()
        return await stores.tasks.toggle_complete(_resolve_task_id(stores, task_id))

    task = _run(_toggle())
    console.print(f"Task {task.id[:8]} is now [bold]{task.status.value}[/bold]")


@task_app.command("stats")
def task_stats():
    """Show task statistics."""
    async def _stats():
        stores = await _open_stores()
        return stores.tasks.get_statistics()

    stats = _run(_stats())
    table = Table(title=f"Tasks ({stats.total})")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    for status, count in stats.by_status.items():
        table.add_row(status.value, str(count))
    console.print(table)
    console.print(f"Overdue: [red]{stats.overdue}[/red]  Due soon: [yellow]{stats.due_soon}[/yellow]")


# ---------------------------------------------------------------------------
# Social events
# ---------------------------------------------------------------------------

@event_app.command("add")
def event_add(
    event_type: str = typer.Argument(..., help="wedding, funeral, birthday..."),
    title: str = typer.Argument(...),
    date: str = typer.Argument(..., help="ISO date or text like '3월 5일'"),
    name: Optional[str] = typer.Option(None, "--name", help="Contact name"),
    phone: str = typer.Option("", "--phone"),
    relationship: Relationship = typer.Option(Relationship.ETC, "--relationship", "-r"),
    with_gift: bool = typer.Option(False, "--gift", help="Store the recommended gift amount"),
):
    """Add a social event."""
    event_date = _parse_when(date)
    contact = EventContact(name=name, phone=phone, relationship=relationship.value) if name else None
    gift_amount = recommend(event_type, relationship) if with_gift else None

    async def _add():
        stores = await _open_stores()
        return await stores.social_events.add(
            SocialEventCreateInput(
                type=event_type, title=title, event_date=event_date, contact=contact, gift_amount=gift_amount
            )
        )

    event = _run(_add())
    console.print(f"[green]✓[/green] Added {event.type.value} {event.id[:8]}: {event.title}")


@event_app.command("list")
def event_list(
    status: Optional[str] = typer.Option(None, "--status", "-s"),
    event_type: Optional[str] = typer.Option(None, "--type", "-t"),
):
    """List social events by date."""
    async def _list():
        stores = await _open_stores()
        return stores.social_events.query(
            QueryOptions(status=status, type=event_type, sort_by="eventDate", sort_order="asc")
        )

    events = _run(_list())
    if not events:
        console.print("[dim]No events.[/dim]")
        return

    table = Table(title="Social events")
    table.add_column("ID", style="cyan")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Gift", justify="right")
    for event in events:
        gift_text = f"{event.gift_amount:,}" if event.gift_amount else "-"
        if event.gift_sent:
            gift_text += " ✓"
        table.add_row(event.id[:8], _fmt(event.event_date), event.type.value, event.title, gift_text)
    console.print(table)


@event_app.command("stats")
def event_stats():
    """Show gift totals."""
    async def _stats():
        stores = await _open_stores()
        return stores.social_events.get_statistics()

    stats = _run(_stats())
    console.print(f"Events: {stats.total_events}")
    console.print(f"Gifts sent: {stats.total_gift_sent:,}")
    console.print(f"Gifts pending: {stats.pending_gift_amount:,}")


if __name__ == "__main__":
    app()
