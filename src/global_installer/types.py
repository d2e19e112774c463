"""Shared data types for the global installer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from global_installer.errors import InstallError

__all__ = ["InstallResult"]


@dataclass
class InstallResult:
    """Result of a global install.

    Attributes:
        success: True if installation succeeded.
        package: Package specification as requested.
        installed_path: Directory the package was installed into (None on failure).
        error: Typed error describing the failure (None on success).
    """

    success: bool
    package: str
    installed_path: Path | None = None
    error: InstallError | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires an error")
        if not self.package:
            raise ValueError("package cannot be empty")

    @classmethod
    def ok(cls, package: str, installed_path: Path) -> InstallResult:
        return cls(success=True, package=package, installed_path=installed_path)

    @classmethod
    def failed(cls, package: str, error: InstallError) -> InstallResult:
        return cls(success=False, package=package, error=error)

    @property
    def message(self) -> str | None:
        """User-facing error message (None on success)."""
        return str(self.error) if self.error is not None else None
