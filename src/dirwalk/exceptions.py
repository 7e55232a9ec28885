"""Custom exceptions for dirwalk."""

from typing import Self


class DirwalkError(Exception):
    """Base exception for dirwalk."""


class EntryError(DirwalkError):
    """A single directory or entry could not be read during traversal.

    These never abort a walk: the walker reports them and moves on to the
    next sibling.
    """

    def __init__(self, operation: str, path: str, reason: str):
        self.operation = operation
        self.path = path
        self.reason = reason
        super().__init__(f"{operation}({path}): {reason}")

    @classmethod
    def from_os_error(cls, operation: str, path: str, error: OSError) -> Self:
        """Build from an OSError, using the OS error string as the reason."""
        reason = error.strerror or str(error)
        return cls(operation, path, reason)

