"""Global npm package installs redirected into per-package directories."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from global_installer.protocols import (
    CommandRunner,
    LayoutProvider,
    PlatformResolver,
    PlatformStore,
    ProgressHandle,
    ProgressReporter,
)

__all__ = [
    "__version__",
    "CommandRunner",
    "LayoutProvider",
    "PlatformResolver",
    "PlatformStore",
    "ProgressHandle",
    "ProgressReporter",
]
