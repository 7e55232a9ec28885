"""Output formatting for dirwalk."""

import os
from collections.abc import Iterable

import typer

from dirwalk.exceptions import EntryError


def print_paths(paths: Iterable[str]) -> None:
    """Print one path per line to stdout.

    Paths are written as raw filesystem bytes, so names that are not valid
    in the current encoding come out exactly as stored on disk. The whole
    listing goes out in a single write.
    """
    data = b"".join(os.fsencode(path) + b"\n" for path in paths)
    if not data:
        return
    stdout = typer.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


def print_entry_error(error: EntryError) -> None:
    """Print a traversal diagnostic, e.g. ``opendir(./secret): Permission denied``."""
    typer.echo(os.fsencode(str(error)), err=True)


def print_fatal(message: str) -> None:
    """Print an error that ends the run to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
