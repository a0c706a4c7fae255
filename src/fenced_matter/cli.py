"""Command-line interface for fenced-matter."""

import dataclasses
import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from fenced_matter import __version__
from fenced_matter.exceptions import FrontMatterError
from fenced_matter.parser import FrontMatterParser, MatterOptions, ParseResult
from fenced_matter.registry import default_registry
from fenced_matter.utils.logging import setup_logger

app = typer.Typer(
    help="Extract and decode front matter from Markdown and other text documents",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log scanning and decoding decisions to stderr",
    ),
):
    """Extract and decode front matter."""
    setup_logger(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def version():
    """Show version information."""
    console.print(f"fenced-matter version [bold]{__version__}[/bold]")


def build_options(
    delimiter: Optional[str],
    excerpt_delimiter: Optional[str],
    default_tag: Optional[str],
    no_excerpt: bool,
    strict: bool,
) -> MatterOptions:
    """Merge command-line flags over FENCED_MATTER_* environment settings.

    Args:
        delimiter: Front matter fence marker, or None to keep the configured one
        excerpt_delimiter: Excerpt separator, or None to keep the configured one
        default_tag: Engine tag for untagged blocks, or None to keep the configured one
        no_excerpt: Disable excerpt extraction
        strict: Fail on unterminated blocks

    Returns:
        MatterOptions for the parser
    """
    options = MatterOptions.from_env()
    overrides = {}
    if delimiter is not None:
        overrides["delimiter"] = delimiter
    if excerpt_delimiter is not None:
        overrides["excerpt_delimiter"] = excerpt_delimiter
    if default_tag is not None:
        overrides["default_tag"] = default_tag
    if no_excerpt:
        overrides["excerpt"] = False
    if strict:
        overrides["strict"] = True
    return dataclasses.replace(options, **overrides)


def render_result(result: ParseResult, console: Console) -> None:
    """Print a parse result in human-readable form.

    Args:
        result: Parse result to display
        console: Rich console for output
    """
    if not result.has_matter:
        console.print("[yellow]No front matter found[/yellow]")
    else:
        console.print("[bold]Data:[/bold]")
        console.print(escape(json.dumps(result.data, ensure_ascii=False, indent=2)))
    console.print()

    if result.excerpt is not None:
        console.print("[bold]Excerpt:[/bold]")
        console.print(escape(result.excerpt))
        console.print()

    console.print("[bold]Content:[/bold]")
    console.print(escape(result.content))


def _print_json(result: ParseResult) -> None:
    # NaN and Infinity are valid YAML/TOML floats but not valid JSON
    try:
        payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as e:
        err_console.print(
            f"[red]Error: front matter cannot be written as JSON: {escape(str(e))}[/red]"
        )
        sys.exit(1)
    typer.echo(payload)


@app.command()
def parse(
    file: typer.FileText = typer.Argument(
        ...,
        help="Document to parse ('-' reads standard input)",
        encoding="utf-8",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Front matter fence marker (default: ---)",
    ),
    excerpt_delimiter: Optional[str] = typer.Option(
        None,
        "--excerpt-delimiter",
        "-e",
        help="Excerpt separator line (default: same as delimiter)",
    ),
    default_tag: Optional[str] = typer.Option(
        None,
        "--default-tag",
        "-t",
        help="Engine used when the opening fence has no tag (default: yaml)",
    ),
    no_excerpt: bool = typer.Option(
        False,
        "--no-excerpt",
        help="Do not extract an excerpt",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail when the opening fence is never closed",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as a JSON document",
    ),
):
    """Parse a document and print its front matter, excerpt and content."""
    try:
        options = build_options(delimiter, excerpt_delimiter, default_tag, no_excerpt, strict)
        parser = FrontMatterParser(options)
        result = parser.parse(file.read())

    except FrontMatterError as e:
        if as_json and e.result is not None:
            _print_json(e.result)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if as_json:
        _print_json(result)
    else:
        render_result(result, console)


@app.command()
def engines():
    """List the built-in engines and the tags they are registered under."""
    registry = default_registry()
    for tag in registry.tags():
        engine = registry.resolve(tag)
        console.print(f"[green]{tag}[/green]  {engine.name}")


if __name__ == "__main__":
    app()
