"""Protocol definitions for the installer's collaborators.

The installer never reaches for process-wide state: everything it needs is
handed to it through these interfaces, carried by an InstallContext.
Designing to interfaces enables:
- Deterministic tests with fake platforms and fake processes
- Swapping the progress UI without touching install logic

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from global_installer.command import InstallCommand, ProcessOutcome
    from global_installer.platform import PlatformSpec, ToolchainImage


@runtime_checkable
class PlatformResolver(Protocol):
    """Protocol for resolving the active toolchain platform."""

    def resolve_default_platform(self) -> PlatformSpec | None:
        """Get the default platform.

        Returns:
            The configured default platform, or None if there is none.
        """
        ...

    def checkout(self, platform: PlatformSpec) -> ToolchainImage:
        """Turn a platform into a usable toolchain image.

        Args:
            platform: Platform to check out.

        Returns:
            ToolchainImage with concrete binary directories.

        Raises:
            CheckoutError: If the platform can't be materialized.
        """
        ...


@runtime_checkable
class LayoutProvider(Protocol):
    """Protocol for locating the installer's directories."""

    def home_directory(self) -> Path:
        """Get the installer home directory."""
        ...

    def package_install_directory(self, home: Path, package_name: str) -> Path:
        """Get the directory a package is installed into.

        Args:
            home: Installer home directory.
            package_name: Package name without version.

        Returns:
            Install directory, unique per package name.
        """
        ...


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running child processes to completion."""

    def run(self, command: InstallCommand) -> ProcessOutcome:
        """Run a command, blocking until it exits.

        Args:
            command: Command to run.

        Returns:
            Exit status with captured, decoded stdout and stderr.

        Raises:
            OSError: If the process could not be started.
        """
        ...


@runtime_checkable
class ProgressHandle(Protocol):
    """A visible progress indicator."""

    def finish_and_clear(self) -> None:
        """Dismiss the indicator."""
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Protocol for starting progress indicators."""

    def start(self, message: str) -> ProgressHandle:
        """Show a progress indicator.

        Args:
            message: Text shown next to the indicator.

        Returns:
            Handle used to dismiss the indicator.
        """
        ...


@runtime_checkable
class PlatformStore(PlatformResolver, Protocol):
    """Platform resolver that can also persist the default platform."""

    def save_default_platform(self, platform: PlatformSpec) -> Path:
        """Store a platform as the default.

        Args:
            platform: Platform to make the default.

        Returns:
            Path of the written platform file.
        """
        ...
