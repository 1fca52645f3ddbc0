"""Runtime settings and logging setup.

Settings come from defaults, then an optional YAML file, then environment
variables, each layer overriding the previous one.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .db import MemoryStorage, SqliteStorage, Storage
from .db.engine import DATA_DIR, DB_FILENAME
from .utils.metrics import get_zone

CONFIG_FILENAME = "forge_log.yaml"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

STORAGE_BACKENDS = ("sqlite", "memory")


@dataclass
class Settings:
    """Service configuration."""

    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    storage: str = "sqlite"
    seed: bool = True
    log_level: str = "INFO"
    # IANA zone that decides when "today" rolls over for daily tracking.
    timezone: str = "UTC"

    @property
    def db_path(self) -> Path:
        return self.data_dir / DB_FILENAME

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        self.storage = self.storage.lower()
        if self.storage not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend '{self.storage}' "
                f"(expected one of: {', '.join(STORAGE_BACKENDS)})"
            )
        self.log_level = self.log_level.upper()
        get_zone(self.timezone)


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_yaml_config(path: Path) -> dict:
    """Read a YAML settings file. A missing file yields no overrides."""
    if not path.is_file():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def load_settings(environ: dict | None = None) -> Settings:
    """Resolve settings from defaults, YAML and the environment."""
    env = os.environ if environ is None else environ
    values: dict = {}

    data_dir = Path(env.get("FORGE_LOG_DATA_DIR", DATA_DIR))
    config_path = Path(env.get("FORGE_LOG_CONFIG", data_dir / CONFIG_FILENAME))
    for key, value in load_yaml_config(config_path).items():
        if key in ("data_dir", "storage", "seed", "log_level", "timezone"):
            values[key] = value

    if "FORGE_LOG_DATA_DIR" in env:
        values["data_dir"] = env["FORGE_LOG_DATA_DIR"]
    if "FORGE_LOG_STORAGE" in env:
        values["storage"] = env["FORGE_LOG_STORAGE"]
    if "FORGE_LOG_SEED" in env:
        values["seed"] = env["FORGE_LOG_SEED"]
    if "FORGE_LOG_LOG_LEVEL" in env:
        values["log_level"] = env["FORGE_LOG_LOG_LEVEL"]
    if "FORGE_LOG_TIMEZONE" in env:
        values["timezone"] = env["FORGE_LOG_TIMEZONE"]

    if "seed" in values:
        values["seed"] = _as_bool(values["seed"])
    return Settings(**values)


def create_storage(settings: Settings) -> Storage:
    """Build the storage backend named by ``settings.storage``."""
    if settings.storage == "memory":
        return MemoryStorage()
    return SqliteStorage(settings.db_path)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr with a single timestamped format."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
