"""Initialize project command."""

import click

from ..config import create_storage
from ..db import init_db, seed_demo_data
from .base import async_command, echo_info, echo_success, get_settings


@click.command()
@click.option("--no-seed", is_flag=True, help="Skip the starter exercises, tabs and quotes")
@click.pass_context
@async_command
async def init(ctx: click.Context, no_seed: bool):
    """Initialize the forge-log data directory and database.

    Creates the data directory, builds the SQLite schema and, unless
    --no-seed is given, fills empty tables with starter data.
    """
    settings = get_settings(ctx)
    echo_info(f"Initializing forge-log in {settings.data_dir}")

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    await init_db(settings.db_path)
    echo_success("Database initialized")

    if not no_seed:
        counts = await seed_demo_data(create_storage(settings))
        seeded = ", ".join(f"{n} {name}" for name, n in counts.items() if n)
        echo_success(f"Seeded {seeded}" if seeded else "Existing data left untouched")

    click.echo()
    click.echo("Next steps:")
    click.echo("  forge-log serve                       # start the API")
    click.echo("  forge-log import weights export.csv   # load a RENPHO export")
