"""Default platform resolution and toolchain image checkout."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from global_installer.errors import CheckoutError, PlatformConfigError
from global_installer.layout import Layout

logger = logging.getLogger(__name__)

__all__ = [
    "DefaultPlatformResolver",
    "PlatformFile",
    "PlatformSpec",
    "ToolchainImage",
]


class PlatformSpec(BaseModel):
    """A Node runtime version with an optional pinned npm version."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node: str = Field(min_length=1)
    npm: str | None = None

    def __str__(self) -> str:
        if self.npm:
            return f"node@{self.node} npm@{self.npm}"
        return f"node@{self.node} (bundled npm)"


class PlatformFile(BaseModel):
    """Contents of the stored default platform file."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = "1.0"
    default_platform: PlatformSpec | None = Field(default=None, alias="defaultPlatform")


@dataclass(frozen=True)
class ToolchainImage:
    """A checked-out platform: concrete directories holding node and npm.

    Attributes:
        platform: The platform this image was checked out from.
        node_bin: Directory containing the node binary (and bundled npm).
        npm_bin: Directory containing a separately pinned npm, if any.
        shim_dir: Directory of the installer's own shims, removed from PATH.
    """

    platform: PlatformSpec
    node_bin: Path
    npm_bin: Path | None = None
    shim_dir: Path | None = None

    def bin_dirs(self) -> list[Path]:
        """Image directories in lookup order."""
        if self.npm_bin is not None:
            return [self.npm_bin, self.node_bin]
        return [self.node_bin]

    def executable_search_path(self, ambient: str | None = None) -> str:
        """Build the PATH value for a child process running this image.

        Image directories come first so their npm wins over any other npm.
        The ambient entries follow, minus the shim directory, so the child
        never loops back into the installer's shims.

        Args:
            ambient: PATH to extend. Defaults to the current process PATH.

        Returns:
            ``os.pathsep``-joined search path.
        """
        if ambient is None:
            ambient = os.environ.get("PATH", "")

        entries: list[str] = []
        for directory in self.bin_dirs():
            entry = str(directory)
            if entry not in entries:
                entries.append(entry)

        shim = str(self.shim_dir) if self.shim_dir is not None else None
        for entry in ambient.split(os.pathsep):
            if not entry or entry == shim or entry in entries:
                continue
            entries.append(entry)

        return os.pathsep.join(entries)


class DefaultPlatformResolver:
    """Reads the default platform from the home directory and checks it out.

    Satisfies the PlatformResolver protocol structurally.
    """

    def __init__(self, layout: Layout) -> None:
        """Initialize resolver.

        Args:
            layout: Layout used to locate the platform file and images.
        """
        self.layout = layout

    def load(self) -> PlatformFile:
        """Load the platform file.

        Returns:
            Parsed PlatformFile (empty if the file doesn't exist).

        Raises:
            PlatformConfigError: If the file can't be read or is invalid.
        """
        path = self.layout.platform_file(self.layout.home_directory())
        if not path.exists():
            return PlatformFile()
        try:
            return PlatformFile.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise PlatformConfigError(f"Could not read platform file {path}: {e}") from e
        except ValidationError as e:
            raise PlatformConfigError(f"Invalid platform file {path}: {e}") from e

    def save_default_platform(self, platform: PlatformSpec) -> Path:
        """Store a platform as the default.

        Args:
            platform: Platform to make the default.

        Returns:
            Path of the written platform file.
        """
        path = self.layout.platform_file(self.layout.home_directory())
        path.parent.mkdir(parents=True, exist_ok=True)
        data = PlatformFile(default_platform=platform)
        path.write_text(
            data.model_dump_json(by_alias=True, indent=2, exclude_none=True),
            encoding="utf-8",
        )
        logger.debug("Saved default platform %s to %s", platform, path)
        return path

    def resolve_default_platform(self) -> PlatformSpec | None:
        """Get the default platform, or None if none is configured."""
        return self.load().default_platform

    def checkout(self, platform: PlatformSpec) -> ToolchainImage:
        """Resolve a platform to the local directories holding its binaries.

        Args:
            platform: Platform to check out.

        Returns:
            ToolchainImage for the platform.

        Raises:
            CheckoutError: If an image directory is missing.
        """
        home = self.layout.home_directory()
        node_bin = self._bin_dir(self.layout.node_image_directory(home, platform.node))
        if not node_bin.is_dir():
            raise CheckoutError(
                f"Node {platform.node} is not available: missing image directory {node_bin}"
            )

        npm_bin = None
        if platform.npm:
            npm_bin = self._bin_dir(self.layout.npm_image_directory(home, platform.npm))
            if not npm_bin.is_dir():
                raise CheckoutError(
                    f"npm {platform.npm} is not available: missing image directory {npm_bin}"
                )

        logger.debug("Checked out %s from %s", platform, node_bin)
        return ToolchainImage(
            platform=platform,
            node_bin=node_bin,
            npm_bin=npm_bin,
            shim_dir=self.layout.shim_directory(home),
        )

    def _bin_dir(self, image_dir: Path) -> Path:
        # Windows node distributions keep binaries at the image root
        if os.name == "nt":
            return image_dir
        return image_dir / "bin"
