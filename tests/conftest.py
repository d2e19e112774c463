"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from global_installer.command import ProcessOutcome
from global_installer.context import InstallContext
from global_installer.layout import Layout
from global_installer.platform import PlatformSpec, ToolchainImage


@pytest.fixture
def temp_home(tmp_path: Path) -> Path:
    """Create a temporary installer home directory."""
    home = tmp_path / ".global-installer"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def layout(temp_home: Path) -> Layout:
    """Create a layout rooted at the temporary home."""
    return Layout(temp_home)


# ============================================================================
# Platform Fixtures
# ============================================================================


@pytest.fixture
def node_platform() -> PlatformSpec:
    """Sample default platform."""
    return PlatformSpec(node="20.11.0")


@pytest.fixture
def toolchain_image(temp_home: Path, node_platform: PlatformSpec) -> ToolchainImage:
    """Sample checked-out image."""
    return ToolchainImage(
        platform=node_platform,
        node_bin=temp_home / "tools" / "image" / "node" / "20.11.0" / "bin",
        shim_dir=temp_home / "bin",
    )


@pytest.fixture
def node_image_dir(layout: Layout, temp_home: Path) -> Path:
    """Create an on-disk node image for the sample platform."""
    bin_dir = layout.node_image_directory(temp_home, "20.11.0") / "bin"
    bin_dir.mkdir(parents=True)
    return bin_dir


# ============================================================================
# Mock Collaborator Fixtures
# ============================================================================


@pytest.fixture
def mock_platforms(node_platform: PlatformSpec, toolchain_image: ToolchainImage) -> MagicMock:
    """Create a mock PlatformResolver with an active platform."""
    platforms = MagicMock()
    platforms.resolve_default_platform.return_value = node_platform
    platforms.checkout.return_value = toolchain_image
    return platforms


@pytest.fixture
def mock_runner() -> MagicMock:
    """Create a mock CommandRunner whose process exits successfully."""
    runner = MagicMock()
    runner.run.return_value = ProcessOutcome(returncode=0, stdout="added 1 package", stderr="")
    return runner


@pytest.fixture
def mock_progress() -> MagicMock:
    """Create a mock ProgressReporter.

    ``mock_progress.start.return_value`` is the handle the installer receives.
    """
    return MagicMock()


@pytest.fixture
def install_context(
    mock_platforms: MagicMock,
    layout: Layout,
    mock_runner: MagicMock,
    mock_progress: MagicMock,
) -> InstallContext:
    """Create an InstallContext with mocked platform, process and progress."""
    return InstallContext(
        platforms=mock_platforms,
        layout=layout,
        runner=mock_runner,
        progress=mock_progress,
    )
