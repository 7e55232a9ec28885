"""Entry classification against the active filter set."""

import os

from dirwalk.models import EntryKind
from dirwalk.models import FilterSet


def accept(filters: FilterSet, st: os.stat_result) -> bool:
    """Check whether an entry passes the filter set.

    Args:
        filters: Kinds selected on the command line
        st: lstat metadata for the entry (symlinks not followed)

    Returns:
        True if no filter is active, or if the entry's own kind is enabled.
        A symlink only matches the symlink filter, whatever it points to.
    """
    if filters.is_empty:
        return True
    return EntryKind.from_mode(st.st_mode) in filters.kinds
