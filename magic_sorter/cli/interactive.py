"""
Interactive menu for sorting folders.

Keeps one sorter alive for the whole session so that live runs can be
undone from the menu.
"""

import sys
from datetime import date
from pathlib import Path
from typing import Optional, Set

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..config import Settings, get_settings
from ..core.categories import category_label
from ..core.errors import SorterError
from ..core.messages import default_parent_folder_name
from ..core.types import Category, Locale, SortOptions
from ..organization import EventLog, Sorter
from ..version import get_version_string
from .base import CLIDisplay, common_options, init_logging
from .sort import describe_options, display_batch_result, display_undo_result

console = Console()

UI_TEXT = {
    Locale.ENGLISH: {
        "sort": "Sort Files",
        "simulate": "Simulate Sort",
        "undo": "Undo Last",
        "folder": "Choose Folder",
        "categories": "File Types",
        "options": "Options",
        "language": "Français",
        "exit": "Exit",
    },
    Locale.FRENCH: {
        "sort": "Trier",
        "simulate": "Simuler",
        "undo": "Annuler",
        "folder": "Choisir un dossier",
        "categories": "Types de fichiers",
        "options": "Options",
        "language": "English",
        "exit": "Quitter",
    },
}

DATED_PREFIX = {Locale.ENGLISH: "Sorted {date}", Locale.FRENCH: "Trié le {date}"}


def relabel_parent_folder(name: str, locale: Locale, today: date) -> str:
    """
    Rename a default-looking parent folder name after a language switch.

    Names the user typed themselves are kept; blank names and names that
    start with a default are replaced by a dated default in the new language.
    """
    defaults = [default_parent_folder_name(other) for other in Locale]
    if name and not any(name.startswith(default) for default in defaults):
        return name
    return DATED_PREFIX[locale].format(date=today.isoformat())


class InteractiveSession:
    """Mutable shell state; each run gets an immutable snapshot of it."""

    def __init__(
        self,
        settings: Settings,
        directory: Optional[Path] = None,
        quiet: bool = False,
    ) -> None:
        self.directory = directory
        self.locale = settings.locale
        self.recursive = settings.recursive
        self.dry_run = settings.dry_run
        self.create_parent_folder = settings.create_parent_folder
        self.parent_folder_name = settings.parent_folder_name
        self.disabled: Set[Category] = set(settings.disabled_categories)
        self.display = CLIDisplay(quiet=quiet, console=console)
        self.sorter = Sorter(events=EventLog(capacity=settings.log_capacity))
        self.sorter.events.subscribe(self.display.print_event)

    def snapshot(self, dry_run: bool) -> SortOptions:
        return SortOptions(
            recursive=self.recursive,
            dry_run=dry_run,
            create_parent_folder=self.create_parent_folder,
            parent_folder_name=self.parent_folder_name,
            disabled_categories=frozenset(self.disabled),
            locale=self.locale,
        )

    def text(self, key: str) -> str:
        return UI_TEXT[self.locale][key]

    def print_menu(self) -> None:
        """Print the main menu."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Option", style="bold cyan", width=5)
        table.add_column("Action", style="bold")

        table.add_row("1", self.text("sort"))
        table.add_row("2", self.text("simulate"))
        if self.sorter.can_undo:
            table.add_row("3", f"[red]{self.text('undo')}[/red]")
        table.add_row("4", self.text("folder"))
        table.add_row("5", self.text("categories"))
        table.add_row("6", self.text("options"))
        table.add_row("7", self.text("language"))
        table.add_row("0", self.text("exit"))

        target = str(self.directory) if self.directory else "-"
        console.print(
            Panel(table, title=f"Magic Sorter · {target}", border_style="cyan")
        )

    def choose_folder(self) -> None:
        while True:
            path = Path(Prompt.ask("Folder")).expanduser().resolve()
            if path.is_dir():
                self.directory = path
                return
            console.print(f"[red]'{path}' is not a directory.[/red]")
            if not Confirm.ask("Try again?", default=True):
                return

    def run(self, dry_run: bool) -> None:
        if self.directory is None:
            self.choose_folder()
            if self.directory is None:
                return
        options = self.snapshot(dry_run)
        self.display.print_config(describe_options(self.directory, options))
        self.sorter.events.clear()
        result = self.sorter.run_batch(self.directory, options)
        display_batch_result(self.display, result)

    def undo(self) -> None:
        if not self.sorter.can_undo:
            console.print("[yellow]Nothing to undo.[/yellow]")
            return
        display_undo_result(self.display, self.sorter.undo_last(self.locale))

    def toggle_categories(self) -> None:
        """Let the user enable or disable categories one at a time."""
        categories = list(Category)
        while True:
            table = Table(title=self.text("categories"))
            table.add_column("#", style="cyan", justify="right")
            table.add_column("Category")
            table.add_column("Enabled", justify="center")
            for index, category in enumerate(categories, 1):
                enabled = category not in self.disabled
                table.add_row(
                    str(index),
                    category_label(category, self.locale),
                    "[green]✓[/green]" if enabled else "[red]✗[/red]",
                )
            console.print(table)

            choice = Prompt.ask(
                "Toggle which category? (blank to return)", default=""
            )
            if not choice:
                return
            if not choice.isdigit() or not 1 <= int(choice) <= len(categories):
                console.print("[red]Invalid choice.[/red]")
                continue
            category = categories[int(choice) - 1]
            if category in self.disabled:
                self.disabled.discard(category)
            else:
                self.disabled.add(category)

    def edit_options(self) -> None:
        self.create_parent_folder = Confirm.ask(
            "Create parent folder?", default=self.create_parent_folder
        )
        if self.create_parent_folder:
            self.parent_folder_name = Prompt.ask(
                "Folder name (blank for default)",
                default=self.parent_folder_name,
                show_default=bool(self.parent_folder_name),
            )
        self.recursive = Confirm.ask("Scan subfolders?", default=self.recursive)

    def switch_language(self) -> None:
        self.locale = (
            Locale.FRENCH if self.locale == Locale.ENGLISH else Locale.ENGLISH
        )
        self.parent_folder_name = relabel_parent_folder(
            self.parent_folder_name, self.locale, date.today()
        )

    def loop(self) -> None:
        """Run the menu until the user exits."""
        console.print(
            f"[bold cyan]Magic Sorter v{get_version_string()}[/bold cyan]"
        )
        while True:
            console.print()
            self.print_menu()
            choices = ["0", "1", "2", "4", "5", "6", "7"]
            if self.sorter.can_undo:
                choices.append("3")

            try:
                choice = Prompt.ask("Select an option", choices=choices, default="0")
                if choice == "0":
                    break
                elif choice == "1":
                    self.run(dry_run=False)
                elif choice == "2":
                    self.run(dry_run=True)
                elif choice == "3":
                    self.undo()
                elif choice == "4":
                    self.choose_folder()
                elif choice == "5":
                    self.toggle_categories()
                elif choice == "6":
                    self.edit_options()
                elif choice == "7":
                    self.switch_language()
            except KeyboardInterrupt:
                console.print("\n\n[cyan]Goodbye![/cyan]")
                break
            except SorterError as e:
                console.print(f"\n[red]Error: {e}[/red]")


@click.command("interactive")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False),
    required=False,
)
@common_options
@init_logging
def interactive_command(directory: Optional[str], verbose: bool, quiet: bool) -> None:
    """
    Sort folders from an interactive menu.

    Sorting, simulating and undoing happen in one session, so every live run
    can be undone until the session ends.
    """
    session = InteractiveSession(
        get_settings(),
        Path(directory).resolve() if directory else None,
        quiet=quiet,
    )
    try:
        session.loop()
    except EOFError:
        sys.exit(0)


if __name__ == "__main__":
    interactive_command()
