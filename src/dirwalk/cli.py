"""Command-line interface for dirwalk."""

import locale
from typing import Annotated

import click
import typer
from typer.core import TyperCommand

from dirwalk import __version__
from dirwalk.models import FilterSet
from dirwalk.operations import list_entries
from dirwalk.output import print_entry_error
from dirwalk.output import print_fatal
from dirwalk.output import print_paths

USAGE = "[START_DIR] [-l] [-d] [-f] [-s]"

app = typer.Typer(
    help="List filesystem entries below a directory", add_completion=False
)


class ListingCommand(TyperCommand):
    """Command that reports usage errors on a single stderr line."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            typer.echo(
                f"Usage: {ctx.command_path} {USAGE} ({e.format_message()})", err=True
            )
            raise typer.Exit(e.exit_code) from None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirwalk {__version__}")
        raise typer.Exit()


def init_collation_locale() -> None:
    """Take LC_COLLATE from the environment, falling back to "C"."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        locale.setlocale(locale.LC_COLLATE, "C")


@app.command(cls=ListingCommand)
def dirwalk(
    start_dir: Annotated[
        str, typer.Argument(help="Directory to list (default: current directory)")
    ] = ".",
    links: Annotated[
        bool, typer.Option("-l", "--links", help="Include symbolic links")
    ] = False,
    dirs: Annotated[
        bool, typer.Option("-d", "--dirs", help="Include directories")
    ] = False,
    files: Annotated[
        bool, typer.Option("-f", "--files", help="Include regular files")
    ] = False,
    sort: Annotated[
        bool, typer.Option("-s", "--sort", help="Sort output by LC_COLLATE")
    ] = False,
    detect_loops: Annotated[
        bool,
        typer.Option(
            "--detect-loops", help="Never enter the same directory (device+inode) twice"
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """List entries below START_DIR, one path per line.

    With no type flags every entry is listed; -l, -d and -f may be combined.
    Symbolic links are listed but never followed.
    """
    init_collation_locale()

    filters = FilterSet(symlinks=links, directories=dirs, files=files)
    try:
        result = list_entries(
            start_dir,
            filters,
            sort=sort,
            on_error=print_entry_error,
            detect_loops=detect_loops,
        )
        print_paths(result)
    except MemoryError:
        print_fatal("Out of memory")
        raise typer.Exit(1) from None

    result.release()


def main() -> None:
    """Main entry point for the dirwalk CLI."""
    app()


if __name__ == "__main__":
    main()
