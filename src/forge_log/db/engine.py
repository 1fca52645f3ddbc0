"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..models import RESOURCES, Resource

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"

DB_FILENAME = "forge_log.db"

SQL_TYPES = {
    "text": "TEXT",
    "integer": "INTEGER",
    "real": "REAL",
    "timestamp": "TIMESTAMP",
    "json": "TEXT",
}

# Secondary indexes for the common lookups, as (table, column).
INDEXES = [
    ("exercises", "category"),
    ("workout_logs", "completed_at"),
    ("weight_entries", "date"),
    ("step_entries", "date"),
    ("cardio_log_entries", "date"),
    ("blood_entries", "as_of"),
    ("photo_progress", "body_part"),
    ("quotes", "is_active"),
    ("weight_audit", "weight_entry_id"),
    ("changes_audit", "exercise_id"),
    ("pr_changes_audit", "personal_record_id"),
    ("daily_set_progress", "date"),
    ("daily_workout_status", "date"),
    ("workout_notes", "date"),
    ("timer_lap_times", "timer_id"),
]


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


def quote_ident(name: str) -> str:
    """Quote an identifier; some columns (``order``) are SQL keywords."""
    return '"' + name.replace('"', '""') + '"'


def create_table_sql(resource: Resource) -> str:
    """Build the CREATE TABLE statement for a resource."""
    columns = []
    for column, kind in resource.columns.items():
        definition = f"{quote_ident(column)} {SQL_TYPES[kind]}"
        if column == "id":
            definition += " PRIMARY KEY"
        columns.append(definition)
    return (
        f"CREATE TABLE IF NOT EXISTS {quote_ident(resource.table)} (\n    "
        + ",\n    ".join(columns)
        + "\n)"
    )


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Add columns that newer model versions declare but old databases lack."""
    for resource in RESOURCES:
        cursor = await db.execute(f"PRAGMA table_info({quote_ident(resource.table)})")
        existing = {col[1] for col in await cursor.fetchall()}

        for column, kind in resource.columns.items():
            if column not in existing:
                logger.info("Adding column %s.%s", resource.table, column)
                await db.execute(
                    f"ALTER TABLE {quote_ident(resource.table)} "
                    f"ADD COLUMN {quote_ident(column)} {SQL_TYPES[kind]}"
                )

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        for resource in RESOURCES:
            await db.execute(create_table_sql(resource))

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)

        # Create indexes for common queries
        for table, column in INDEXES:
            await db.execute(
                f"CREATE INDEX IF NOT EXISTS {quote_ident(f'idx_{table}_{column}')} "
                f"ON {quote_ident(table)}({quote_ident(column)})"
            )
        for resource in RESOURCES:
            if resource.key_field:
                await db.execute(
                    "CREATE UNIQUE INDEX IF NOT EXISTS "
                    f"{quote_ident(f'idx_{resource.table}_{resource.key_field}')} "
                    f"ON {quote_ident(resource.table)}({quote_ident(resource.key_field)})"
                )

        await db.commit()

    logger.info("Database initialized at %s", db_path)
