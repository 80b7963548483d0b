"""
CLI Interface
=============
Command-line interface for the PDF kit.

Usage:
    python -m pdf_kit lines <pdf_path>
    python -m pdf_kit pages <pdf_path>
    python -m pdf_kit search <pdf_path> <term> [--case-sensitive]
    python -m pdf_kit extract <input_pdf> <output_pdf> <page>...
    python -m pdf_kit info <pdf_path> [--json-output]
    python -m pdf_kit convert <pdf_path> [-o output.txt]
"""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .engine import KitConfig, PdfKit
from .errors import PdfKitError
from .models import SearchOptions

console = Console()


def _fail(error: PdfKitError):
    console.print(
        f"[red]Error {escape('[' + error.type.value + ']')}:[/] "
        f"{escape(error.message)}",
        highlight=False,
    )
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="pdf-kit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_file: str):
    """PDF Kit — text, search and page tools for PDF files."""
    ctx.obj = PdfKit(KitConfig(log_level=log_level, log_file=log_file))


@cli.command()
@click.argument("pdf_path")
@click.pass_obj
def lines(kit: PdfKit, pdf_path: str):
    """Print the text of a PDF line by line."""
    try:
        for line in kit.intoarray(pdf_path):
            click.echo(line)
    except PdfKitError as e:
        _fail(e)


@cli.command()
@click.argument("pdf_path")
@click.pass_obj
def pages(kit: PdfKit, pdf_path: str):
    """Print the number of pages in a PDF."""
    try:
        click.echo(kit.get_page_count(pdf_path))
    except PdfKitError as e:
        _fail(e)


@cli.command()
@click.argument("pdf_path")
@click.argument("term")
@click.option(
    "--case-sensitive",
    is_flag=True,
    default=False,
    help="Match letter case exactly",
)
@click.pass_obj
def search(kit: PdfKit, pdf_path: str, term: str, case_sensitive: bool):
    """Print the lines of a PDF that contain TERM."""
    try:
        matches = kit.search_text(
            pdf_path,
            term,
            SearchOptions(case_sensitive=case_sensitive),
        )
    except PdfKitError as e:
        _fail(e)

    for line in matches:
        click.echo(line)

    if not matches:
        console.print(
            f"[yellow]No lines contain {escape(repr(term))}[/]",
            highlight=False,
        )


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("input_path")
@click.argument("output_path")
@click.argument("page_numbers", nargs=-1, type=int)
@click.pass_obj
def extract(kit: PdfKit, input_path: str, output_path: str, page_numbers):
    """Copy PAGE_NUMBERS (1-indexed, in order) into a new PDF."""
    try:
        kit.extract_pages(input_path, output_path, list(page_numbers))
    except PdfKitError as e:
        _fail(e)

    console.print(f"[green]Saved:[/] {escape(output_path)}", highlight=False)


@cli.command()
@click.argument("pdf_path")
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output metadata as JSON (for programmatic use)",
)
@click.pass_obj
def info(kit: PdfKit, pdf_path: str, json_output: bool):
    """Display PDF metadata."""
    try:
        metadata = kit.get_metadata(pdf_path)
    except PdfKitError as e:
        _fail(e)

    if json_output:
        click.echo(json.dumps(
            metadata.model_dump(by_alias=True),
            indent=2,
            ensure_ascii=False,
        ))
        return

    table = Table(title="PDF Information", border_style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("File", metadata.filename)
    table.add_row("Pages", str(metadata.total_pages))
    table.add_row("Text Length", str(metadata.text_length))

    console.print()
    console.print(table)
    console.print()


@cli.command()
@click.argument("pdf_path")
@click.option(
    "--output", "-o",
    default=None,
    help="Write the text to this file instead of stdout",
)
@click.pass_obj
def convert(kit: PdfKit, pdf_path: str, output: str):
    """Convert a PDF to plain text."""
    try:
        text = kit.convert_to_text(pdf_path, output)
    except PdfKitError as e:
        _fail(e)

    if output:
        console.print(f"[green]Saved:[/] {escape(output)}", highlight=False)
    else:
        click.echo(text)


# ─── Entry point (for python -m pdf_kit.cli) ──────────────────────────────────


if __name__ == "__main__":
    cli()
