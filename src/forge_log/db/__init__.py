"""Database layer for forge-log."""

from .base import Storage
from .engine import get_db_path, init_db
from .memory import MemoryStorage
from .repositories import SqliteStorage
from .seed import seed_demo_data

__all__ = [
    "get_db_path",
    "init_db",
    "MemoryStorage",
    "seed_demo_data",
    "SqliteStorage",
    "Storage",
]
