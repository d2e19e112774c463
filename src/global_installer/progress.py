"""Progress spinners shown while the package manager runs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from global_installer.protocols import ProgressHandle, ProgressReporter

__all__ = ["NullProgress", "RichProgress", "RichSpinner", "spinner"]


class RichSpinner:
    """A running rich spinner. Clears itself from the terminal when finished."""

    def __init__(self, progress: Progress) -> None:
        self._progress = progress
        self._finished = False

    def finish_and_clear(self) -> None:
        """Stop the spinner and remove it from the terminal."""
        if self._finished:
            return
        self._finished = True
        self._progress.stop()


class RichProgress:
    """Starts transient rich spinners on a console.

    Satisfies the ProgressReporter protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def start(self, message: str) -> RichSpinner:
        """Start a spinner with a message."""
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        )
        progress.add_task(escape(message), total=None)
        progress.start()
        return RichSpinner(progress)


class _NullHandle:
    def finish_and_clear(self) -> None:
        pass


class NullProgress:
    """Progress reporter that shows nothing, for quiet and non-interactive use."""

    def start(self, message: str) -> _NullHandle:
        return _NullHandle()


@contextmanager
def spinner(reporter: ProgressReporter, message: str) -> Iterator[ProgressHandle]:
    """Show a spinner for the duration of the block.

    ``finish_and_clear()`` is called exactly once when the block exits,
    whether it returns normally or raises.
    """
    handle = reporter.start(message)
    try:
        yield handle
    finally:
        handle.finish_and_clear()
