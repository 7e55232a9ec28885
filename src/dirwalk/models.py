"""Data models for dirwalk."""

import stat
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Self


class EntryKind(str, Enum):
    """Kind of a filesystem entry, judged on the entry itself (never its target)."""

    SYMLINK = "symlink"
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> Self:
        """Classify an lstat ``st_mode`` value."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class FilterSet:
    """Entry kinds selected on the command line. Empty means "any kind"."""

    symlinks: bool = False
    directories: bool = False
    files: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.symlinks or self.directories or self.files)

    @property
    def kinds(self) -> frozenset[EntryKind]:
        """Enabled kinds, as a set."""
        enabled = set()
        if self.symlinks:
            enabled.add(EntryKind.SYMLINK)
        if self.directories:
            enabled.add(EntryKind.DIRECTORY)
        if self.files:
            enabled.add(EntryKind.FILE)
        return frozenset(enabled)

    @classmethod
    def from_kinds(cls, kinds: Iterable[EntryKind]) -> Self:
        kinds = set(kinds)
        return cls(
            symlinks=EntryKind.SYMLINK in kinds,
            directories=EntryKind.DIRECTORY in kinds,
            files=EntryKind.FILE in kinds,
        )


@dataclass
class Collector:
    """Append-only sequence of matched paths, in discovery order."""

    paths: list[str] = field(default_factory=list)

    def push(self, path: str) -> None:
        self.paths.append(path)

    def sort(self, key: Callable[[str], Any] | None = None) -> None:
        """Reorder the collected paths in place."""
        self.paths.sort(key=key)

    def release(self) -> None:
        """Drop every collected path."""
        self.paths.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)
