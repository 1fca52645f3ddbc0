"""Import data files commands."""

from pathlib import Path

import click

from ..models import Category
from ..services import (
    ImportResult,
    import_affirmations,
    import_blood,
    import_quotes,
    import_steps,
    import_weights,
    import_workouts,
)
from .base import async_command, echo_error, echo_success, echo_warning, open_storage


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8-sig")


def _report(kind: str, result: ImportResult) -> None:
    if result.imported:
        echo_success(f"Imported {result.imported} {kind}")
    else:
        echo_warning(f"No {kind} imported")
    if result.failed:
        echo_error(f"{result.failed} row(s) skipped")
        for message in result.errors:
            click.echo(f"  {message}")


@click.group(name="import")
def import_data():
    """Import data files through the same services the API uses.

    Available sources:
    - quotes / affirmations: one per line
    - workouts: ORDER|TITLE|WEIGHT|REPS|NOTES rows for one workout day
    - weights: RENPHO CSV export
    - blood: lab CSV (long or wide format) or JSON
    - steps: Date,Steps,Distance,Floors Ascended CSV
    """


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--append", is_flag=True, help="Keep existing quotes instead of replacing them")
@click.pass_context
@async_command
async def quotes(ctx: click.Context, file: str, append: bool):
    """Import quotes written as "text" - Author."""
    result = await import_quotes(open_storage(ctx), _read(file), append=append)
    _report("quotes", result)


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@async_command
async def affirmations(ctx: click.Context, file: str):
    """Append affirmations, one per line."""
    _report("affirmations", await import_affirmations(open_storage(ctx), _read(file)))


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--category",
    "-c",
    required=True,
    type=click.Choice([c.value for c in Category]),
    help="Workout day the exercises belong to",
)
@click.pass_context
@async_command
async def workouts(ctx: click.Context, file: str, category: str):
    """Replace a workout day's exercises."""
    result = await import_workouts(open_storage(ctx), _read(file), category)
    _report(f"{category} exercises", result)


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@async_command
async def weights(ctx: click.Context, file: str):
    """Import a RENPHO CSV export."""
    _report("weight entries", await import_weights(open_storage(ctx), _read(file)))


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@async_command
async def blood(ctx: click.Context, file: str):
    """Import blood panels."""
    _report("blood panels", await import_blood(open_storage(ctx), _read(file)))


@import_data.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@async_command
async def steps(ctx: click.Context, file: str):
    """Import daily step counts."""
    _report("step entries", await import_steps(open_storage(ctx), _read(file)))
