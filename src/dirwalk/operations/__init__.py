"""High-level operations for dirwalk."""

from dirwalk.operations.listing import list_entries

__all__ = [
    "list_entries",
]
