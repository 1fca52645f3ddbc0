"""Export data commands."""

import click

from ..models import STEP_ENTRIES, WEIGHT_ENTRIES
from ..parsers import write_renpho_csv, write_steps_csv
from .base import async_command, echo_success, open_storage

EXPORTS = {
    "weights": (WEIGHT_ENTRIES, write_renpho_csv),
    "steps": (STEP_ENTRIES, write_steps_csv),
}


@click.command()
@click.argument("kind", type=click.Choice(sorted(EXPORTS)))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write to file instead of stdout",
)
@click.pass_context
@async_command
async def export(ctx: click.Context, kind: str, output: str | None):
    """Export weight entries (RENPHO format) or step entries as CSV.

    Examples:
        forge-log export weights -o renpho_health_data.csv
        forge-log export steps
    """
    resource, writer = EXPORTS[kind]
    storage = open_storage(ctx)
    records = await storage.list_all(resource)
    csv_text = writer(records)

    if output:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(csv_text)
        echo_success(f"Wrote {len(records)} {kind} to {output}")
    else:
        click.echo(csv_text, nl=False)
