"""Resale ticket value scoring and alert pick selection."""

__version__ = "0.1.0"
