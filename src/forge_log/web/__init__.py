"""Web API for forge-log."""

from .app import create_app

__all__ = ["create_app"]
