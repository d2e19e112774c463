"""Terminal output and logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from global_installer.platform import PlatformSpec


class Output:
    """Status messages for the command line (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_platform(self, platform: PlatformSpec) -> None:
        """Display the default platform.

        Args:
            platform: Platform to display.
        """
        table = Table(title="Default Platform")
        table.add_column("Tool", style="cyan")
        table.add_column("Version", style="green")
        table.add_row("node", platform.node)
        table.add_row("npm", platform.npm or "bundled")
        self.console.print(table)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Log at DEBUG (including package manager output) instead of WARNING.
    """
    root = logging.getLogger()
    if getattr(root, "_global_installer_configured", False):
        root.setLevel(logging.DEBUG if verbose else logging.WARNING)
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root._global_installer_configured = True  # type: ignore[attr-defined]
