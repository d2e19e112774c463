"""Tests for CLI commands using context injection.

Commands accept a _context parameter for dependency injection, enabling unit
tests without spawning npm or touching the real home directory.
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from rich.console import Console

from global_installer import cli
from global_installer.command import ProcessOutcome
from global_installer.console import Output
from global_installer.context import InstallContext, create_context
from global_installer.errors import PlatformConfigError
from global_installer.platform import PlatformSpec


@pytest.fixture
def out(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture CLI output in a wide, plain console."""
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "output", Output(Console(file=buffer, width=200)))
    return buffer


class TestInstallCommand:
    """Tests for the install command."""

    def test_install_success(
        self, install_context: InstallContext, out: io.StringIO, temp_home: Path
    ) -> None:
        cli.install(package="left-pad", quiet=False, _context=install_context)
        text = out.getvalue()
        assert "Installed left-pad into" in text
        assert "left-pad" in text

    def test_install_not_found_exits(
        self, install_context: InstallContext, mock_runner: MagicMock, out: io.StringIO
    ) -> None:
        mock_runner.run.return_value = ProcessOutcome(
            returncode=1, stdout="", stderr="npm ERR! code E404"
        )
        with pytest.raises(typer.Exit) as exc_info:
            cli.install(package="nonexistent-pkg-xyz", quiet=False, _context=install_context)
        assert exc_info.value.exit_code == 1
        assert "Could not find package 'nonexistent-pkg-xyz'" in out.getvalue()

    def test_install_no_platform_exits(
        self, install_context: InstallContext, mock_platforms: MagicMock, out: io.StringIO
    ) -> None:
        mock_platforms.resolve_default_platform.return_value = None
        with pytest.raises(typer.Exit):
            cli.install(package="left-pad", quiet=False, _context=install_context)
        assert "Node is not available" in out.getvalue()

    def test_install_invalid_spec_exits(
        self, install_context: InstallContext, mock_runner: MagicMock, out: io.StringIO
    ) -> None:
        with pytest.raises(typer.Exit):
            cli.install(package="", quiet=False, _context=install_context)
        mock_runner.run.assert_not_called()
        assert "cannot be empty" in out.getvalue()


class TestPlatformCommands:
    """Tests for platform commands."""

    def test_platform_set(self, temp_home: Path, out: io.StringIO) -> None:
        ctx = create_context(home=temp_home, quiet=True)
        cli.platform_set(node="20.11.0", npm="10.2.4", _context=ctx)

        assert ctx.platforms.resolve_default_platform() == PlatformSpec(
            node="20.11.0", npm="10.2.4"
        )
        assert "Default platform set to node@20.11.0 npm@10.2.4" in out.getvalue()

    def test_platform_set_invalid(self, out: io.StringIO) -> None:
        ctx = MagicMock()
        with pytest.raises(typer.Exit):
            cli.platform_set(node="", npm=None, _context=ctx)
        ctx.platforms.save_default_platform.assert_not_called()

    def test_platform_set_read_only_resolver(self, out: io.StringIO) -> None:
        """A resolver that can't store platforms is reported, not called."""
        ctx = MagicMock()
        ctx.platforms = MagicMock(spec=["resolve_default_platform", "checkout"])
        with pytest.raises(typer.Exit):
            cli.platform_set(node="20.11.0", npm=None, _context=ctx)
        assert "cannot store a default platform" in out.getvalue()

    def test_platform_show(self, out: io.StringIO) -> None:
        ctx = MagicMock()
        ctx.platforms.resolve_default_platform.return_value = PlatformSpec(node="20.11.0")
        cli.platform_show(_context=ctx)
        text = out.getvalue()
        assert "20.11.0" in text
        assert "bundled" in text

    def test_platform_show_none(self, out: io.StringIO) -> None:
        ctx = MagicMock()
        ctx.platforms.resolve_default_platform.return_value = None
        cli.platform_show(_context=ctx)
        assert "No default platform configured" in out.getvalue()

    def test_platform_show_invalid_file(self, out: io.StringIO) -> None:
        ctx = MagicMock()
        ctx.platforms.resolve_default_platform.side_effect = PlatformConfigError("bad file")
        with pytest.raises(typer.Exit):
            cli.platform_show(_context=ctx)
        assert "bad file" in out.getvalue()


class TestConfigCommands:
    """Tests for config commands."""

    def test_config_show(self, temp_home: Path, out: io.StringIO) -> None:
        ctx = create_context(home=temp_home, quiet=True)
        cli.config_show(_context=ctx)
        text = out.getvalue()
        assert f"Home directory: {temp_home}" in text
        assert "platform.json" in text
        assert "packages" in text


class TestVersion:
    """Tests for the version option."""

    def test_version_callback(self, out: io.StringIO) -> None:
        with pytest.raises(typer.Exit):
            cli.version_callback(True)
        assert "global-installer v" in out.getvalue()

    def test_version_callback_noop(self, out: io.StringIO) -> None:
        cli.version_callback(False)
        assert out.getvalue() == ""
