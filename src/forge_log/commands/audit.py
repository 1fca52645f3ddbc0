"""Audit ledger commands."""

import click

from ..models import CHANGES_AUDIT, PR_CHANGES_AUDIT, WEIGHT_AUDIT
from .base import async_command, echo_info, format_table, open_storage

# (resource, columns shown as (header, field))
LEDGERS = {
    "weight": (
        WEIGHT_AUDIT,
        [
            ("When", "created_at"),
            ("Action", "action"),
            ("Source", "source"),
            ("Previous", "previous_weight"),
            ("New", "new_weight"),
            ("Delta", "weight_delta"),
            ("%", "weight_percent_change"),
        ],
    ),
    "changes": (
        CHANGES_AUDIT,
        [
            ("When", "created_at"),
            ("Exercise", "exercise_name"),
            ("Field", "field"),
            ("Previous", "previous_value"),
            ("New", "new_value"),
            ("Delta", "delta"),
            ("Source", "source"),
        ],
    ),
    "pr": (
        PR_CHANGES_AUDIT,
        [
            ("When", "created_at"),
            ("Exercise", "exercise"),
            ("Field", "field"),
            ("Previous", "previous_value"),
            ("New", "new_value"),
            ("Delta", "delta"),
        ],
    ),
}


def _cell(value) -> str:
    if value is None:
        return "-"
    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value)


@click.command()
@click.argument("ledger", type=click.Choice(list(LEDGERS)))
@click.option("--limit", "-n", default=20, type=click.IntRange(min=1), help="Rows to show")
@click.pass_context
@async_command
async def audit(ctx: click.Context, ledger: str, limit: int):
    """Show the newest rows of an audit ledger."""
    resource, columns = LEDGERS[ledger]
    rows = await open_storage(ctx).select(resource, limit=limit)
    if not rows:
        echo_info(f"No {ledger} audit rows yet")
        return
    click.echo(
        format_table(
            [header for header, _ in columns],
            [[_cell(row.get(name)) for _, name in columns] for row in rows],
        )
    )
