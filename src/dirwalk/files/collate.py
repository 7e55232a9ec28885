"""Locale-aware ordering of collected paths."""

import locale
import os

from dirwalk.models import Collector


def collate(collector: Collector) -> None:
    """Sort collected paths in place by the current LC_COLLATE order.

    Under the "C" locale paths are compared as raw filesystem bytes, so names
    that are not valid UTF-8 still sort byte-lexicographically.
    """
    if len(collector) < 2:
        return
    if _is_byte_order_locale(locale.setlocale(locale.LC_COLLATE)):
        collector.sort(key=os.fsencode)
    else:
        collector.sort(key=locale.strxfrm)


def _is_byte_order_locale(name: str) -> bool:
    """True for "C", "POSIX" and the "C.<codeset>" variants."""
    return name in ("C", "POSIX") or name.startswith("C.")
