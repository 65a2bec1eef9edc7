"""Main entry point for the task tracker.

`tasktracker` alone opens the interactive menu; the subcommands are
one-shot shorthands for the same store operations.
"""
from __future__ import annotations
import logging
from pathlib import Path

import click

from .cli import MenuShell
from .config import LOG_LEVELS, get_settings
from .display import render_statistics, render_tasks
from .errors import InvalidInput, NotFound
from .logging_setup import setup_logging
from .store import CompletionOutcome, TaskStore

logger = logging.getLogger(__name__)

# commands that change the store; only these need a save with autosave off
MUTATING_COMMANDS = frozenset({"add", "done", "reopen", "edit", "rm"})


def _store(ctx: click.Context) -> TaskStore:
    return ctx.obj["store"]


def _echo_lines(lines) -> None:
    for line in lines:
        click.echo(line)


def _warn_if_unsaved(store: TaskStore) -> None:
    if not store.last_save_ok:
        click.echo(f"Warning: changes could not be saved to {store.path}.", err=True)


def _fail(ctx: click.Context, exc: Exception) -> None:
    click.echo(str(exc), err=True)
    ctx.exit(1)


@click.group(invoke_without_command=True)
@click.option("--file", "tasks_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task data file (default: $TASKS_FILE or tasks.txt).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Console log level (default: $TASKS_LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, tasks_file, log_level) -> None:
    """Track short text tasks in a flat file."""
    settings = get_settings().with_overrides(tasks_file=tasks_file, log_level=log_level)
    console_level = logging.getLevelName(settings.log_level) if settings.log_level in LOG_LEVELS else logging.WARNING
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    store = TaskStore(settings.tasks_file, autosave=settings.autosave)
    store.load()
    logger.info("Starting with %d task(s) from %s", len(store), store.path)
    ctx.obj = {"store": store, "settings": settings}

    if ctx.invoked_subcommand is None:
        ctx.exit(MenuShell(store, clear_screen=settings.clear_screen).run())


@cli.result_callback()
@click.pass_context
def _save_after_command(ctx: click.Context, result, **kwargs) -> None:
    store = _store(ctx)
    if not store.autosave and ctx.invoked_subcommand in MUTATING_COMMANDS:
        store.save()
        _warn_if_unsaved(store)


@cli.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, words) -> None:
    """Add a task (e.g. tasktracker add write report)."""
    try:
        task = _store(ctx).add(" ".join(words))
    except InvalidInput as exc:
        _fail(ctx, exc)
    click.echo(f"Task {task.id} added.")
    _warn_if_unsaved(_store(ctx))


@cli.command()
@click.argument("task_id", type=int)
@click.pass_context
def done(ctx: click.Context, task_id: int) -> None:
    """Mark a task as completed."""
    try:
        outcome = _store(ctx).mark_completed(task_id)
    except NotFound as exc:
        _fail(ctx, exc)
    if outcome is CompletionOutcome.ALREADY_COMPLETED:
        click.echo(f"Task {task_id} is already completed.")
    else:
        click.echo(f"Task {task_id} marked as completed.")
        _warn_if_unsaved(_store(ctx))


@cli.command()
@click.argument("task_id", type=int)
@click.pass_context
def reopen(ctx: click.Context, task_id: int) -> None:
    """Mark a completed task as pending again."""
    try:
        outcome = _store(ctx).mark_pending(task_id)
    except NotFound as exc:
        _fail(ctx, exc)
    if outcome is CompletionOutcome.ALREADY_PENDING:
        click.echo(f"Task {task_id} is already pending.")
    else:
        click.echo(f"Task {task_id} reopened.")
        _warn_if_unsaved(_store(ctx))


@cli.command()
@click.argument("task_id", type=int)
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def edit(ctx: click.Context, task_id: int, words) -> None:
    """Replace a task's description."""
    try:
        _store(ctx).rename(task_id, " ".join(words))
    except (InvalidInput, NotFound) as exc:
        _fail(ctx, exc)
    click.echo(f"Task {task_id} updated.")
    _warn_if_unsaved(_store(ctx))


@cli.command()
@click.argument("task_id", type=int)
@click.pass_context
def rm(ctx: click.Context, task_id: int) -> None:
    """Delete a task."""
    try:
        _store(ctx).delete(task_id)
    except NotFound as exc:
        _fail(ctx, exc)
    click.echo(f"Task {task_id} removed.")
    _warn_if_unsaved(_store(ctx))


@cli.command("list")
@click.option("--pending", "which", flag_value="pending", help="Only pending tasks.")
@click.option("--completed", "which", flag_value="completed", help="Only completed tasks.")
@click.pass_context
def list_tasks(ctx: click.Context, which) -> None:
    """List tasks in insertion order."""
    store = _store(ctx)
    if which == "pending":
        lines = render_tasks("PENDING TASKS", store.filter_pending(), "No pending tasks! Great job!")
    elif which == "completed":
        lines = render_tasks("COMPLETED TASKS", store.filter_completed(), "No completed tasks yet!")
    else:
        lines = render_tasks("ALL TASKS", store.tasks, "No tasks available!")
    _echo_lines(lines)


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show task statistics."""
    _echo_lines(render_statistics(_store(ctx).statistics()))


def main() -> None:
    cli(prog_name="tasktracker")


if __name__ == "__main__":
    main()
