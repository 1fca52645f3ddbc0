"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import Settings, create_storage
from ..db import Storage


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_settings(ctx: click.Context) -> Settings:
    """Settings resolved by the top-level group."""
    return ctx.find_root().obj


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    settings = get_settings(ctx)
    if settings.storage == "sqlite" and not settings.db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'forge-log init' first."
        )
        ctx.exit(1)


def open_storage(ctx: click.Context) -> Storage:
    """Storage backend for a command, after checking the database exists."""
    ensure_initialized(ctx)
    return create_storage(get_settings(ctx))


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list], padding: int = 2) -> str:
    """Format rows as a left-aligned text table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    def line(cells) -> str:
        return "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(cells))

    lines = [line(headers), line("-" * w for w in widths)]
    lines.extend(line(row) for row in rows)
    return "\n".join(text.rstrip() for text in lines)
