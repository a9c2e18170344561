"""CLI entry point for runes.

Invoked as::

    runes [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m runes.cli.main

Commands
--------
info        Print information about code points
table       Collect code points into a table and print its ranges
version     Show version information
"""
from __future__ import annotations

import logging
import sys
import unicodedata
from collections.abc import Iterable
from typing import TYPE_CHECKING, BinaryIO, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from runes.output import OutputPipeline
    from runes.resolver import RuneMetadataResolver
    from runes.sources import CodepointRequest
    from runes.table import CodepointSet

console = Console()
err_console = Console(stderr=True)


def _fail(message: object) -> NoReturn:
    """Print an error line on stderr and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(message))}", highlight=False)
    sys.exit(1)


def _stdout_sink() -> BinaryIO:
    return click.get_binary_stream("stdout")


def _parse_or_exit(tokens: Iterable[str]) -> list["CodepointRequest"]:
    """Parse code-point tokens, printing the error and exiting on failure."""
    from runes.sources import SourceError, parse_tokens

    try:
        return parse_tokens(tokens)
    except SourceError as exc:
        _fail(exc)


def _run_pipeline(
    pipeline: "OutputPipeline",
    resolver: "RuneMetadataResolver",
    codepoints: Iterable[int],
    sink: BinaryIO,
) -> None:
    """Resolve every code point into ``pipeline``; ``end()`` runs on every path."""
    pipeline.begin(sink)
    try:
        for value in codepoints:
            pipeline.emit(resolver.resolve(value))
    finally:
        pipeline.end()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="runes")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug messages to stderr.")
def cli(verbose: bool) -> None:
    """Print information about Unicode code points."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from runes import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]runes[/bold]", f"v{__version__}")
    table.add_row("Unicode", unicodedata.unidata_version)
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# info command
# ---------------------------------------------------------------------------


@cli.command(name="info")
@click.argument("codepoints", nargs=-1)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON data.")
@click.option("--string", "-s", "text", default=None, help="Describe every character of TEXT.")
def info_command(codepoints: tuple[str, ...], as_json: bool, text: str | None) -> None:
    """Print information about Unicode code points.

    Without arguments, all code points are printed.  Code points starting
    with '0x' or 'u+' are hexadecimal (case-insensitive), anything else is
    decimal; START-END prints an inclusive range.

    Examples:

    \b
        runes info
        runes info 0x2318 40-60
        runes info u+1f970
        runes info --json --string 'héllo'
    """
    from runes.output import OutputError, create_pipeline
    from runes.resolver import RuneMetadataResolver
    from runes.resolver.unicode_data import default_lookups
    from runes.sources import CodepointRequest, iter_codepoints, string_requests

    requests = _parse_or_exit(codepoints)
    if text is not None:
        requests.extend(string_requests(text))
    if not codepoints and text is None:
        requests = [CodepointRequest.everything()]

    resolver = RuneMetadataResolver(default_lookups())
    if as_json:
        pipeline = create_pipeline("json")
    else:
        pipeline = create_pipeline("text", width=resolver.width)

    try:
        _run_pipeline(pipeline, resolver, iter_codepoints(requests), _stdout_sink())
    except OutputError as exc:
        _fail(exc)


# ---------------------------------------------------------------------------
# table command
# ---------------------------------------------------------------------------


def _apply_request(table: "CodepointSet", request: "CodepointRequest", present: bool) -> None:
    if request.ranged:
        if present:
            table.set_range(request.first, request.last)
        else:
            table.unset_range(request.first, request.last)
    elif present:
        table.set(request.first)
    else:
        table.unset(request.first)


@cli.command(name="table")
@click.argument("codepoints", nargs=-1)
@click.option("--string", "-s", "text", default=None, help="Add every character of TEXT.")
@click.option(
    "--exclude",
    "-x",
    multiple=True,
    help="Code point or START-END range to remove afterwards (repeatable).",
)
def table_command(codepoints: tuple[str, ...], text: str | None, exclude: tuple[str, ...]) -> None:
    """Collect code points into a table and print its ranges.

    Prints the table's canonical form: maximal runs of consecutive code
    points, in ascending order.

    Examples:

    \b
        runes table 0x41-0x5a --exclude 0x4d-0x51 --string abcd
    """
    from runes.sources import string_requests
    from runes.table import CodepointSet, DomainError

    added = _parse_or_exit(codepoints)
    if text is not None:
        added.extend(string_requests(text))
    removed = _parse_or_exit(exclude)

    table = CodepointSet()
    try:
        for request in added:
            _apply_request(table, request, True)
        for request in removed:
            _apply_request(table, request, False)
    except DomainError as exc:
        _fail(exc)

    click.echo(table.serialize())


if __name__ == "__main__":
    cli()
