"""Shared fixtures for dirwalk tests."""

import locale

import pytest


@pytest.fixture
def c_collation():
    """Run the test under the C collation locale, restoring it afterwards."""
    previous = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, "C")
    yield
    locale.setlocale(locale.LC_COLLATE, previous)
