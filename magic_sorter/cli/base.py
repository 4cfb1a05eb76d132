"""
Shared building blocks for the command line tools.

Provides the rich display helper, common click options and logging setup.
"""

import functools
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..core.types import LogEvent, LogKind
from ..shared import setup_logging

EVENT_STYLES: Dict[LogKind, tuple] = {
    LogKind.INFO: ("ℹ", "bright_black"),
    LogKind.SUCCESS: ("✓", "green"),
    LogKind.WARNING: ("⚠", "yellow"),
    LogKind.DRY_RUN: ("👁", "dark_orange"),
}


class CLIDisplay:
    """Console output with a quiet switch."""

    def __init__(self, quiet: bool = False, console: Optional[Console] = None) -> None:
        self.quiet = quiet
        self.console = console or Console()

    def print_header(self, title: str) -> None:
        if self.quiet:
            return
        self.console.print(Panel(f"[bold cyan]{title}[/bold cyan]", expand=False))

    def print_config(self, config: Mapping[str, str]) -> None:
        """Print a two-column configuration listing."""
        if self.quiet:
            return
        self.console.print("\n[cyan]Configuration:[/cyan]")
        for key, value in config.items():
            self.console.print(f"  {key}: {escape(str(value))}")
        self.console.print()

    def print_info(self, text: str) -> None:
        if not self.quiet:
            self.console.print(text)

    def print_success(self, text: str) -> None:
        if not self.quiet:
            self.console.print(f"[green]{text}[/green]")

    def print_warning(self, text: str) -> None:
        if not self.quiet:
            self.console.print(f"[yellow]{text}[/yellow]")

    def print_error(self, text: str) -> None:
        # Errors are shown even in quiet mode
        self.console.print(f"[red]✗ {text}[/red]")

    def print_event(self, event: LogEvent) -> None:
        """Print a log event with its kind's icon and color."""
        if self.quiet and event.kind != LogKind.WARNING:
            return
        icon, style = EVENT_STYLES[event.kind]
        self.console.print(
            f"[{style}]{icon}[/{style}] {escape(event.message)}", highlight=False
        )

    def print_summary(self, metrics: Mapping[str, Any], title: str = "Results") -> None:
        """Print a metric/count table."""
        if self.quiet:
            return
        table = Table(title=title)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")
        for name, value in metrics.items():
            table.add_row(name, str(value))
        self.console.print(table)

    @contextmanager
    def spinner_progress(self, description: str) -> Iterator[Progress]:
        """Spinner shown while a blocking operation runs."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
            disable=self.quiet,
        ) as progress:
            progress.add_task(description, total=None)
            yield progress


def common_options(func: Callable) -> Callable:
    """Add -v/--verbose and -q/--quiet options."""
    func = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=False,
        help="Only show warnings and errors",
    )(func)
    func = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        default=False,
        help="Verbose output",
    )(func)
    return func


def init_logging(func: Callable) -> Callable:
    """Configure logging from the verbose/quiet options before running."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        verbose = kwargs.get("verbose", False)
        # Events reach the console through the display; stay at WARNING unless verbose
        setup_logging(verbose=verbose, quiet=not verbose)
        return func(*args, **kwargs)

    return wrapper
