"""High-level listing operation."""

from dirwalk.exceptions import EntryError
from dirwalk.files import collate
from dirwalk.files import walk
from dirwalk.files.walker import ErrorHandler
from dirwalk.models import Collector
from dirwalk.models import FilterSet


def list_entries(
    start_dir: str,
    filters: FilterSet,
    sort: bool = False,
    on_error: ErrorHandler | None = None,
    detect_loops: bool = False,
) -> Collector:
    """List entries below a directory.

    Args:
        start_dir: Directory to list (kept verbatim as the path prefix)
        filters: Kinds to include; an empty FilterSet includes everything
        sort: If True, order the result by the current LC_COLLATE locale
        on_error: Called for each unreadable directory or entry. If None,
            such failures are skipped without notice.
        detect_loops: If True, never enter the same directory twice

    Returns:
        Collector holding matched paths, in pre-order discovery order
        unless sort is set.

    Raises:
        MemoryError: If the result set cannot be grown
    """
    collector = Collector()
    walk(
        start_dir,
        filters,
        collector,
        on_error=on_error if on_error is not None else _ignore_error,
        detect_loops=detect_loops,
    )
    if sort:
        collate(collector)
    return collector


def _ignore_error(error: EntryError) -> None:
    pass
