"""Install context for dependency injection.

The active platform is session state. Instead of reading it from globals,
the installer receives it through an explicit context object, so tests can
inject fake platforms, fake processes and a silent progress UI.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from global_installer.classify import OutcomeClassifier
from global_installer.protocols import (
    CommandRunner,
    LayoutProvider,
    PlatformResolver,
    ProgressReporter,
)


def _default_runner() -> CommandRunner:
    """Create the default command runner."""
    from global_installer.command import SubprocessRunner
    return SubprocessRunner()


def _default_progress() -> ProgressReporter:
    """Create the default progress reporter."""
    from global_installer.progress import RichProgress
    return RichProgress()


@dataclass
class InstallContext:
    """Container for everything one install needs from its surroundings.

    All dependencies are typed using Protocol interfaces, not concrete classes.
    This allows test doubles to be injected without inheritance.
    """

    platforms: PlatformResolver
    layout: LayoutProvider
    runner: CommandRunner = field(default_factory=_default_runner)
    progress: ProgressReporter = field(default_factory=_default_progress)
    classifier: OutcomeClassifier = field(default_factory=OutcomeClassifier)


def create_context(home: Path | None = None, quiet: bool = False) -> InstallContext:
    """Factory for install dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct InstallContext directly with test doubles.

    Args:
        home: Override home directory (for testing).
        quiet: Suppress the progress spinner.

    Returns:
        Configured InstallContext.
    """
    from global_installer.command import SubprocessRunner
    from global_installer.layout import Layout
    from global_installer.platform import DefaultPlatformResolver
    from global_installer.progress import NullProgress, RichProgress

    layout = Layout(home)
    return InstallContext(
        platforms=DefaultPlatformResolver(layout),
        layout=layout,
        runner=SubprocessRunner(),
        progress=NullProgress() if quiet else RichProgress(),
    )
