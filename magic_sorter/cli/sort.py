"""
CLI command for sorting a folder.

Sorts the files of a folder into category subfolders in a single run.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.panel import Panel

from ..config import Settings, get_settings
from ..core.categories import category_label
from ..core.errors import SorterError
from ..core.types import BatchResult, Category, Locale, SortOptions, UndoResult
from ..organization import EventLog, Sorter, resolve_destination_root
from .base import CLIDisplay, common_options, init_logging

CATEGORY_CHOICES = [category.value for category in Category]


def build_options(
    settings: Settings,
    recursive: Optional[bool] = None,
    dry_run: Optional[bool] = None,
    parent_folder: Optional[bool] = None,
    folder_name: Optional[str] = None,
    disable: Tuple[str, ...] = (),
    locale: Optional[str] = None,
) -> SortOptions:
    """
    Merge command line values over the configured defaults.

    Options left as None keep the configured value. Disabled categories are
    added to the configured ones.
    """
    overrides = {}
    if recursive is not None:
        overrides["recursive"] = recursive
    if dry_run is not None:
        overrides["dry_run"] = dry_run
    if parent_folder is not None:
        overrides["create_parent_folder"] = parent_folder
    if folder_name is not None:
        overrides["parent_folder_name"] = folder_name
    if locale is not None:
        overrides["locale"] = Locale(locale)
    overrides["disabled_categories"] = frozenset(settings.disabled_categories) | {
        Category(name) for name in disable
    }
    return settings.to_sort_options(**overrides)


def describe_options(root: Path, options: SortOptions) -> dict:
    """Configuration listing shown before a run."""
    disabled = sorted(
        category_label(category, options.locale)
        for category in options.disabled_categories
    )
    return {
        "Source directory": str(root),
        "Destination": str(resolve_destination_root(root, options)),
        "Recursive scan": str(options.recursive),
        "Dry run": str(options.dry_run),
        "Language": options.locale.value,
        "Disabled categories": ", ".join(disabled) if disabled else "none",
    }


def display_batch_result(display: CLIDisplay, result: BatchResult) -> None:
    """Display the outcome of a sort run."""
    if result.dry_run:
        display.print_summary({"Would move": result.planned_count}, title="Simulation")
        display.print_warning("\nThis was a dry run. No files were modified.")
        display.print_warning("Run without --dry-run to sort the files.")
        return

    display.print_summary(
        {"Moved": result.moved_count, "Failed": result.failed_count},
        title="Sort Results",
    )
    if result.failed_count:
        display.print_error(
            f"{result.failed_count} files could not be moved. See the log above."
        )


def display_undo_result(display: CLIDisplay, result: UndoResult) -> None:
    """Display the outcome of an undo request."""
    display.print_summary(
        {
            "Restored": result.restored_count,
            "Missing": result.skipped_count,
            "Failed": result.failed_count,
        },
        title="Undo Results",
    )


@click.command("sort")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--recursive/--no-recursive",
    default=None,
    help="Also sort files in subfolders",
)
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help="Show what would be moved without moving anything",
)
@click.option(
    "--parent-folder/--no-parent-folder",
    default=None,
    help="Sort into a parent folder instead of the directory itself",
)
@click.option(
    "--folder-name",
    type=str,
    default=None,
    help="Name of the parent folder (default: Sorted / Trié)",
)
@click.option(
    "--disable",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    multiple=True,
    help="Leave files of this category untouched (repeatable)",
)
@click.option(
    "--locale",
    type=click.Choice([locale.value for locale in Locale], case_sensitive=False),
    default=None,
    help="Language for folder names and messages",
)
@click.option(
    "--undo-prompt/--no-undo-prompt",
    default=True,
    help="Offer to undo the batch right after a live run",
)
@click.option(
    "--yes",
    is_flag=True,
    help="Skip confirmation prompts",
)
@common_options
@init_logging
def sort_command(
    directory: str,
    recursive: Optional[bool],
    dry_run: Optional[bool],
    parent_folder: Optional[bool],
    folder_name: Optional[str],
    disable: Tuple[str, ...],
    locale: Optional[str],
    undo_prompt: bool,
    yes: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Sort the files of DIRECTORY into category subfolders.

    Files are classified by extension into Images, Videos, Music, Documents,
    Archives, Apps, Code and Other.

    \b
    Examples:
        # Preview first
        magic-sorter sort ~/Downloads --dry-run

        # Sort into ~/Downloads/Sorted/<Category>/
        magic-sorter sort ~/Downloads

        # Sort subfolders too, in French, leaving images alone
        magic-sorter sort ~/Downloads --recursive --locale fr --disable images

    \b
    The undo history lives in memory only. A live run can be undone from the
    prompt shown after it, or from `magic-sorter interactive`.
    """
    display = CLIDisplay(quiet=quiet)
    root = Path(directory).resolve()

    settings = get_settings()
    options = build_options(
        settings,
        recursive=recursive,
        dry_run=dry_run,
        parent_folder=parent_folder,
        folder_name=folder_name,
        disable=disable,
        locale=locale,
    )

    display.print_header("Magic Sorter")
    display.print_config(describe_options(root, options))

    if options.dry_run:
        display.print_warning("⚠ DRY RUN MODE - No files will be modified\n")
    elif not yes and not quiet:
        display.console.print(
            Panel(
                f"About to move files in {root} into category folders.\n\n"
                "[yellow]Consider running with --dry-run first![/yellow]",
                title="⚠️  Confirmation Required",
                border_style="yellow",
            )
        )
        if not click.confirm("Do you want to continue?", default=False):
            display.print_warning("Operation cancelled.")
            return

    sorter = Sorter(events=EventLog(capacity=settings.log_capacity))
    sorter.events.subscribe(display.print_event)

    try:
        result = sorter.run_batch(root, options)
        display_batch_result(display, result)

        if (
            result.had_undoable_batch
            and undo_prompt
            and not yes
            and not quiet
            and click.confirm("\nUndo this batch?", default=False)
        ):
            display_undo_result(display, sorter.undo_last())
    except SorterError as e:
        display.print_error(f"Error: {e}")
        if verbose:
            display.console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    sort_command()
