"""CLI interface for taskdeck."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from taskdeck import __version__
from taskdeck.config import CONFIG_FILE, TaskdeckConfig
from taskdeck.errors import TaskIndexError
from taskdeck.logging_setup import setup_logging
from taskdeck.models import Priority, Task
from taskdeck.session import TodoSession

console = Console()

PRIORITY_CHOICES = [p.value for p in Priority]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskdeck")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """taskdeck - a prioritised to-do list.

    Tasks are kept sorted: High before Medium before Low, open before
    done, then alphabetically.

    \b
    Examples:
      taskdeck add Buy milk -p high
      taskdeck list
      taskdeck done 1
      taskdeck priority 2 low
    """
    try:
        config = TaskdeckConfig.load(config_path)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Invalid config:[/red] {escape(str(e))}")
        ctx.exit(1)

    setup_logging(logging.DEBUG if verbose else config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    # Relative storage paths follow an explicit config file.
    ctx.obj["root"] = config_path.parent if config_path is not None else None
    ctx.obj["config_path"] = config_path or CONFIG_FILE

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _open_session(ctx: click.Context) -> TodoSession:
    """Create and load the session for this invocation."""
    config: TaskdeckConfig = ctx.obj["config"]
    session = TodoSession.from_config(config, root=ctx.obj["root"])
    session.load()
    return session


def _save_tasks(ctx: click.Context, session: TodoSession) -> None:
    """Persist tasks, exiting non-zero if the write failed."""
    if not session.save_tasks():
        console.print("[yellow]Warning:[/yellow] changes could not be saved.")
        ctx.exit(1)


def _task_at(ctx: click.Context, session: TodoSession, position: int) -> Task:
    """Look up a task by its 1-based display position."""
    tasks = session.store.snapshot()
    if not 1 <= position <= len(tasks):
        _invalid_position(ctx, position, len(tasks))
    return tasks[position - 1]


def _invalid_position(ctx: click.Context, position: int, count: int) -> None:
    if count:
        console.print(f"[red]Invalid position {position}.[/red] Must be 1-{count}")
    else:
        console.print("[red]No tasks yet.[/red] Use [cyan]taskdeck add[/cyan]")
    ctx.exit(1)


def _priority_chip(priority: Priority) -> Text:
    return Text(f" {priority.label} ", style=f"bold white on {priority.color}")


def _render_tasks(tasks: tuple[Task, ...], dark: bool, pending_only: bool = False) -> Table:
    """Build the task table for display."""
    header_style = "bold white" if dark else "bold black"
    name_style = "white" if dark else "black"

    table = Table(title="Tasks", show_header=True, header_style=header_style)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Done", justify="center")
    table.add_column("Priority")
    table.add_column("Task")

    for position, task in enumerate(tasks, 1):
        if pending_only and task.completed:
            continue

        status = "[green]✓[/green]" if task.completed else "[dim]○[/dim]"
        style = "dim strike" if task.completed else name_style

        table.add_row(
            str(position),
            status,
            _priority_chip(task.priority),
            Text(task.name, style=style),
        )

    return table


@main.command("list")
@click.option("--pending", "-p", is_flag=True, help="Hide completed tasks")
@click.pass_context
def list_tasks(ctx: click.Context, pending: bool) -> None:
    """Show tasks in priority order."""
    session = _open_session(ctx)
    tasks = session.store.snapshot()

    if not tasks:
        console.print("[dim]No tasks yet.[/dim] Use [cyan]taskdeck add[/cyan]")
        return

    console.print(_render_tasks(tasks, session.is_dark, pending_only=pending))

    done = sum(1 for t in tasks if t.completed)
    console.print(f"[dim]{len(tasks) - done} open, {done} done[/dim]")


@main.command()
@click.argument("name", nargs=-1, required=True)
@click.option("--priority", "-p", type=click.Choice(PRIORITY_CHOICES), help="Task priority")
@click.pass_context
def add(ctx: click.Context, name: tuple[str, ...], priority: str | None) -> None:
    """Add a task.

    \b
    Examples:
      taskdeck add Buy milk
      taskdeck add "Call mom" -p low
    """
    config: TaskdeckConfig = ctx.obj["config"]
    level = Priority(priority) if priority else config.defaults.priority

    session = _open_session(ctx)
    task = session.store.add(" ".join(name), level)

    if task is None:
        console.print("[yellow]Nothing added:[/yellow] task name is blank.")
        return

    _save_tasks(ctx, session)
    console.print(f"[green]Added:[/green] {escape(task.name)} [dim]({level.label})[/dim]")


def _set_completed(ctx: click.Context, position: int, value: bool | None) -> None:
    session = _open_session(ctx)
    task = _task_at(ctx, session, position)

    if value is None:
        session.store.toggle_completed(position - 1)
        value = not task.completed
    else:
        session.store.set_completed(position - 1, value)

    _save_tasks(ctx, session)
    if value:
        console.print(f"[green]Completed:[/green] {escape(task.name)}")
    else:
        console.print(f"[cyan]Reopened:[/cyan] {escape(task.name)}")


@main.command()
@click.argument("position", type=int)
@click.pass_context
def done(ctx: click.Context, position: int) -> None:
    """Mark the task at POSITION as complete."""
    _set_completed(ctx, position, True)


@main.command()
@click.argument("position", type=int)
@click.pass_context
def undo(ctx: click.Context, position: int) -> None:
    """Mark the task at POSITION as not complete."""
    _set_completed(ctx, position, False)


@main.command()
@click.argument("position", type=int)
@click.pass_context
def toggle(ctx: click.Context, position: int) -> None:
    """Flip completion of the task at POSITION."""
    _set_completed(ctx, position, None)


@main.command()
@click.argument("position", type=int)
@click.argument("level", type=click.Choice(PRIORITY_CHOICES))
@click.pass_context
def priority(ctx: click.Context, position: int, level: str) -> None:
    """Change the priority of the task at POSITION."""
    session = _open_session(ctx)
    new_priority = Priority(level)

    try:
        session.store.set_priority(position - 1, new_priority)
    except TaskIndexError:
        _invalid_position(ctx, position, len(session.store))

    _save_tasks(ctx, session)
    console.print(f"[green]Priority set:[/green] #{position} -> {new_priority.label}")


@main.command()
@click.argument("position", type=int)
@click.argument("new_name", nargs=-1, required=True)
@click.pass_context
def rename(ctx: click.Context, position: int, new_name: tuple[str, ...]) -> None:
    """Rename the task at POSITION."""
    session = _open_session(ctx)
    task = _task_at(ctx, session, position)
    text = " ".join(new_name).strip()

    if not text:
        console.print("[yellow]Not renamed:[/yellow] new name is blank.")
        return

    session.store.rename(position - 1, text)
    _save_tasks(ctx, session)
    console.print(f"[green]Renamed:[/green] {escape(task.name)} -> {escape(text)}")


@main.command()
@click.argument("position", type=int)
@click.pass_context
def remove(ctx: click.Context, position: int) -> None:
    """Delete the task at POSITION."""
    session = _open_session(ctx)

    try:
        task = session.store.remove(position - 1)
    except TaskIndexError:
        _invalid_position(ctx, position, len(session.store))

    _save_tasks(ctx, session)
    console.print(f"[green]Removed:[/green] {escape(task.name)}")


@main.command()
@click.argument("mode", type=click.Choice(["dark", "light", "toggle"]), required=False)
@click.pass_context
def theme(ctx: click.Context, mode: str | None) -> None:
    """Show or change the theme (dark, light or toggle)."""
    session = _open_session(ctx)

    if mode is None:
        console.print(f"Theme: [cyan]{'dark' if session.is_dark else 'light'}[/cyan]")
        return

    if mode == "toggle":
        ok = session.toggle_theme()
    else:
        ok = session.set_dark(mode == "dark")

    if not ok:
        console.print("[yellow]Warning:[/yellow] theme preference could not be saved.")
        ctx.exit(1)

    console.print(f"[green]Theme set:[/green] {'dark' if session.is_dark else 'light'}")


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a config file with the current settings."""
    config: TaskdeckConfig = ctx.obj["config"]
    path: Path = ctx.obj["config_path"]

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {path}. Use --force to overwrite.")
        return

    config.save(path)
    console.print(f"[green]Config saved:[/green] {path}")
