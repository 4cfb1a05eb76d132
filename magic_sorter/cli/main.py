"""
Main CLI entry point for Magic Sorter.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ..core.categories import category_label, extensions_for
from ..core.types import Category, Locale
from ..version import get_version_string
from .interactive import interactive_command
from .sort import sort_command

console = Console()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit",
)
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """
    Magic Sorter - sort folders into category subfolders by file extension.
    """
    if version:
        console.print(f"Magic Sorter version {get_version_string()}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("categories")
@click.option(
    "--locale",
    type=click.Choice([locale.value for locale in Locale], case_sensitive=False),
    default=Locale.ENGLISH.value,
    help="Language for folder names",
)
def categories_command(locale: str) -> None:
    """List categories, their folder names and extensions."""
    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Folder", style="bold")
    table.add_column("Extensions")

    for category in Category:
        extensions = sorted(extensions_for(category))
        table.add_row(
            category.value,
            category_label(category, Locale(locale)),
            ", ".join(extensions) if extensions else "[dim]everything else[/dim]",
        )
    console.print(table)


cli.add_command(sort_command)
cli.add_command(interactive_command)


if __name__ == "__main__":
    cli()
