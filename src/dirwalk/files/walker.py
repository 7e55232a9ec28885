"""Depth-first directory traversal."""

import os
from collections.abc import Callable
from collections.abc import Iterator

from dirwalk.exceptions import EntryError
from dirwalk.files.classify import accept
from dirwalk.models import Collector
from dirwalk.models import EntryKind
from dirwalk.models import FilterSet

ErrorHandler = Callable[[EntryError], None]


def walk(
    start_dir: str,
    filters: FilterSet,
    collector: Collector,
    on_error: ErrorHandler,
    detect_loops: bool = False,
) -> None:
    """Collect every entry below start_dir that passes the filters.

    Entries are visited in directory-iteration order, and each one is
    classified before its children are visited (pre-order). Symbolic links
    are never descended into. The start directory itself is not collected.

    Unreadable directories and entries are reported through on_error and
    skipped; the walk always runs to completion.

    Args:
        start_dir: Directory to list. Used verbatim as the prefix of every
            collected path.
        filters: Kinds to collect
        collector: Receives matched paths
        on_error: Called once per directory or entry that could not be read
        detect_loops: If True, do not enter a directory whose device and
            inode were already entered (hard-linked directory loops)
    """
    visited: set[tuple[int, int]] | None = None
    if detect_loops:
        visited = set()
        try:
            st = os.stat(start_dir)
        except OSError:
            # Reported below when the directory fails to open
            pass
        else:
            visited.add((st.st_dev, st.st_ino))

    entries = _list_directory(start_dir, on_error)
    if entries is None:
        return

    # Explicit stack instead of recursion, so depth is bounded only by memory
    stack: list[tuple[str, Iterator[os.DirEntry]]] = [(start_dir, iter(entries))]
    while stack:
        parent, remaining = stack[-1]
        entry = next(remaining, None)
        if entry is None:
            stack.pop()
            continue

        # os.scandir never yields "." or ".."
        path = f"{parent}/{entry.name}"
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            on_error(EntryError.from_os_error("lstat", path, e))
            continue

        if accept(filters, st):
            collector.push(path)

        if EntryKind.from_mode(st.st_mode) is not EntryKind.DIRECTORY:
            continue

        if visited is not None:
            key = (st.st_dev, st.st_ino)
            if key in visited:
                on_error(EntryError("loop", path, "directory already visited"))
                continue
            visited.add(key)

        children = _list_directory(path, on_error)
        if children is not None:
            stack.append((path, iter(children)))


def _list_directory(path: str, on_error: ErrorHandler) -> list[os.DirEntry] | None:
    """Read a whole directory listing, closing the handle before returning.

    Returns:
        The entries in iteration order, or None if the directory could not
        be read (the failure has been reported).
    """
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        on_error(EntryError.from_os_error("opendir", path, e))
        return None
