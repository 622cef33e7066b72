"""Conversion and inspection commands."""

import sys

import click
from rich.markup import escape
from rich.table import Table

from ferry.config import load_settings
from ferry.markup import MarkupEngine, resolve_emoji, tokenize, unpaired_markers

from . import cli
from .shared import configure_logging, console, load_context


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--context", "context_path", type=click.Path(exists=True, dir_okay=False),
              help="JSON file with users/roles/channels id → name maps")
@click.option("--debug", is_flag=True, help="Log every slice and its conversion")
@click.option("--check", is_flag=True, help="Fail if the output has unpaired markers")
def convert(source, context_path, debug, check):
    """Convert Discord markdown from SOURCE (default: stdin) to MarkdownV2."""
    settings = load_settings()
    if debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(settings)

    context = load_context(context_path)
    result = MarkupEngine(settings).convert(source.read(), context)
    click.echo(result)

    if check:
        unpaired = unpaired_markers(result)
        if unpaired:
            console.print(f"[red]Unpaired markers: {escape(' '.join(unpaired))}[/red]")
            sys.exit(1)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def slices(source):
    """Show how SOURCE (default: stdin) is split into slices."""
    text = source.read()
    pieces = tokenize(text)

    table = Table(title=f"{len(pieces)} slices", padding=(0, 1))
    table.add_column("#", justify="right")
    table.add_column("Kind", style="bold cyan")
    table.add_column("Span")
    table.add_column("Raw")

    for index, piece in enumerate(pieces):
        table.add_row(str(index), piece.kind.value, f"{piece.start}-{piece.end}", escape(repr(piece.raw)))

    console.print(table)


@cli.command()
@click.argument("name")
def emoji(name):
    """Look up the standard emoji for a custom emoji NAME."""
    glyph = resolve_emoji(name)
    if glyph is None:
        console.print(f"[yellow]No standard emoji for '{escape(name)}', it will be dropped.[/yellow]")
        sys.exit(1)
    click.echo(glyph)
