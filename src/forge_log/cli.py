"""CLI entry point for forge-log."""

import click

from . import __version__
from .commands import audit, export, import_data, init, serve
from .config import configure_logging, load_settings


@click.group()
@click.version_option(version=__version__, prog_name="forge-log")
@click.pass_context
def main(ctx: click.Context):
    """forge-log: personal fitness tracking API.

    Tracks workouts, body weight, blood work, steps, cardio and journal
    entries, and keeps an audit trail of progress changes.

    Example usage:

        # Initialize the database with starter data
        forge-log init

        # Load a RENPHO export and a workout day
        forge-log import weights renpho.csv
        forge-log import workouts push.txt --category push

        # Run the API
        forge-log serve
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    ctx.obj = settings


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(import_data)
main.add_command(export)
main.add_command(audit)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
