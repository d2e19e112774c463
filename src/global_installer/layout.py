"""On-disk layout of the installer home directory."""

from __future__ import annotations

import os
from pathlib import Path

from global_installer.errors import InvalidPackageSpecError

__all__ = ["HOME_ENV_VAR", "DEFAULT_HOME_NAME", "Layout"]

# Overrides the home directory location
HOME_ENV_VAR = "GLOBAL_INSTALLER_HOME"

DEFAULT_HOME_NAME = ".global-installer"


class Layout:
    """Computes paths inside the installer home directory.

    Satisfies the LayoutProvider protocol structurally. All methods are
    pure path computations; nothing is created on disk.
    """

    def __init__(self, home: Path | None = None) -> None:
        """Initialize layout.

        Args:
            home: Explicit home directory. When omitted, resolved from
                ``GLOBAL_INSTALLER_HOME`` or ``~/.global-installer`` on each call.
        """
        self._home = home

    def home_directory(self) -> Path:
        """Get the installer home directory."""
        if self._home is not None:
            return self._home
        override = os.environ.get(HOME_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / DEFAULT_HOME_NAME

    def shim_directory(self, home: Path) -> Path:
        """Get the directory holding the user-facing shims."""
        return home / "bin"

    def image_directory(self, home: Path) -> Path:
        """Get the root of all checked-out images."""
        return home / "tools" / "image"

    def node_image_directory(self, home: Path, version: str) -> Path:
        """Get the image directory for a Node version."""
        return self.image_directory(home) / "node" / version

    def npm_image_directory(self, home: Path, version: str) -> Path:
        """Get the image directory for a pinned npm version."""
        return self.image_directory(home) / "npm" / version

    def packages_directory(self, home: Path) -> Path:
        """Get the parent directory of all per-package install directories."""
        return self.image_directory(home) / "packages"

    def package_install_directory(self, home: Path, package_name: str) -> Path:
        """Get the directory a package's global install is redirected into.

        Args:
            home: Installer home directory.
            package_name: Package name without version (scoped names keep their scope).

        Returns:
            Install directory, unique per package name.

        Raises:
            InvalidPackageSpecError: If the name would place the directory
                outside the packages directory.
        """
        packages = self.packages_directory(home)
        segments = package_name.replace("\\", "/").split("/")
        path = packages / package_name
        if any(s in ("", ".", "..") for s in segments) or not path.is_relative_to(packages):
            raise InvalidPackageSpecError(
                f"Package name '{package_name}' does not map to its own directory"
            )
        return path

    def platform_file(self, home: Path) -> Path:
        """Get the file storing the default platform."""
        return home / "tools" / "user" / "platform.json"
