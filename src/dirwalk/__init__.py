"""Recursive filesystem listing with type filters and locale-aware sorting."""

__version__ = "0.1.0"
