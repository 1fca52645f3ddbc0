"""CLI commands for forge-log."""

from .audit import audit
from .export import export
from .import_data import import_data
from .init import init
from .serve import serve

__all__ = [
    "audit",
    "export",
    "import_data",
    "init",
    "serve",
]
