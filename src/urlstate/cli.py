"""Typer CLI interface for urlstate."""

import json

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .exceptions import URLStateError
from .logging_config import setup_logging
from .nested import parse_nested_params, stringify_nested_params
from .utils.url_utils import analyze_url, get_relative_path

app = typer.Typer(
    name="urlstate",
    help="urlstate - inspect and convert URL query and hash parameters",
    add_completion=False,
)
console = Console()


def _configure(debug: bool) -> None:
    setup_logging(level=settings.LOG_LEVEL, debug=debug or settings.DEBUG)


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


@app.command()
def parse(
    query: str = typer.Argument(..., help="Query string with bracket keys, e.g. 'a[b]=1&a[c]=2'"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Convert a nested query string into a JSON tree."""
    _configure(debug)
    tree = parse_nested_params(query)
    console.print_json(json.dumps(tree.to_python()), highlight=False)


@app.command()
def stringify(
    data: str = typer.Argument(..., help="JSON object, e.g. '{\"a\": {\"b\": \"1\"}}'"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Convert a JSON tree into a nested query string."""
    _configure(debug)
    try:
        tree = json.loads(data)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON: {e}")
    if not isinstance(tree, dict):
        _fail("Expected a JSON object")
    console.print(stringify_nested_params(tree), markup=False, highlight=False, soft_wrap=True)


@app.command()
def inspect(
    url: str = typer.Argument(..., help="Absolute URL to break down"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Show the path, query parameters and hash parameters of a URL."""
    _configure(debug)
    try:
        summary = analyze_url(url)
    except URLStateError as e:
        _fail(e.message)

    table = Table(title=url, show_lines=False)
    table.add_column("Part", style="bold")
    table.add_column("Key")
    table.add_column("Values")

    table.add_row("origin", "", summary["origin"])
    table.add_row("path", "", summary["pathname"])
    for key, values in summary["search_params"].items():
        table.add_row("search", key, ", ".join(values))
    table.add_row("hash", "", summary["hash_path"])
    for key, values in summary["hash_params"].items():
        table.add_row("hash param", key, ", ".join(values))

    console.print(table)


@app.command()
def relative(
    from_url: str = typer.Argument(..., help="Starting address"),
    to_url: str = typer.Argument(..., help="Target address"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print the relative path from one address to another."""
    _configure(debug)
    try:
        path = get_relative_path(from_url, to_url)
    except URLStateError as e:
        _fail(e.message)
    console.print(path, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
