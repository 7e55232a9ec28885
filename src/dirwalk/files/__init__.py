"""Filesystem operations for dirwalk."""

from dirwalk.files.classify import accept
from dirwalk.files.collate import collate
from dirwalk.files.walker import walk

__all__ = [
    "accept",
    "collate",
    "walk",
]
