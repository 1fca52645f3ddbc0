"""Utility functions for forge-log."""
