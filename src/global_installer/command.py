"""Package manager command construction and execution."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from global_installer.package import PackageSpec
from global_installer.platform import ToolchainImage

logger = logging.getLogger(__name__)

__all__ = [
    "INSTALL_FLAGS",
    "PREFIX_ENV_VAR",
    "InstallCommand",
    "ProcessOutcome",
    "SubprocessRunner",
    "build_install_command",
]

PACKAGE_MANAGER = "npm"

# npm honors this to relocate where `--global` installs are written
PREFIX_ENV_VAR = "npm_config_prefix"

INSTALL_FLAGS = (
    "install",
    "--global",
    "--loglevel=warn",
    "--no-update-notifier",
    "--no-audit",
)


@dataclass(frozen=True)
class InstallCommand:
    """A fully specified child process invocation.

    Attributes:
        program: Executable name, looked up on the child's PATH.
        args: Ordered arguments after the program.
        env: Variables set on top of the inherited environment.
    """

    program: str
    args: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        """Full argument vector for the current operating system."""
        argv = [self.program, *self.args]
        if os.name == "nt":
            # npm is a .cmd script on Windows and needs the shell to run
            return ["cmd.exe", "/C", *argv]
        return argv

    def environment(self) -> dict[str, str]:
        """Inherited environment with the overrides applied."""
        return {**os.environ, **self.env}

    def __str__(self) -> str:
        overrides = " ".join(f"{k}={shlex.quote(v)}" for k, v in self.env.items())
        command = " ".join(shlex.quote(arg) for arg in self.argv)
        return f"{overrides} {command}" if overrides else command


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit status and captured output of a finished child process."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


def build_install_command(
    package: PackageSpec,
    image: ToolchainImage,
    install_dir: Path,
) -> InstallCommand:
    """Build the ``npm install --global`` invocation for a package.

    The global install is redirected into ``install_dir`` through
    ``npm_config_prefix``; PATH is replaced with the image's search path so
    the image's own npm is the one that runs.

    Args:
        package: Package to install.
        image: Checked-out toolchain image.
        install_dir: Directory npm should treat as its global prefix.

    Returns:
        The install command.
    """
    return InstallCommand(
        program=PACKAGE_MANAGER,
        args=(*INSTALL_FLAGS, str(package)),
        env={
            "PATH": image.executable_search_path(),
            PREFIX_ENV_VAR: str(install_dir),
        },
    )


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


class SubprocessRunner:
    """Runs commands to completion and captures their output.

    Satisfies the CommandRunner protocol structurally.
    """

    def run(self, command: InstallCommand) -> ProcessOutcome:
        """Run a command and wait for it to exit.

        Args:
            command: Command to run.

        Returns:
            ProcessOutcome with decoded stdout and stderr.

        Raises:
            OSError: If the process could not be started.
        """
        p = subprocess.run(
            command.argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=command.environment(),
            check=False,
        )
        return ProcessOutcome(
            returncode=p.returncode,
            stdout=_decode(p.stdout),
            stderr=_decode(p.stderr),
        )
