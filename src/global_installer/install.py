"""Global package installs redirected into per-package directories."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from global_installer.command import InstallCommand, ProcessOutcome, build_install_command
from global_installer.context import InstallContext, create_context
from global_installer.errors import (
    InstallError,
    InstallLaunchFailedError,
    NoActivePlatformError,
)
from global_installer.package import PackageSpec
from global_installer.platform import ToolchainImage
from global_installer.progress import spinner
from global_installer.types import InstallResult

logger = logging.getLogger(__name__)

__all__ = ["Installer", "install_global"]


class Installer:
    """Installs packages with ``npm install --global``, redirected per package.

    npm itself is never patched or wrapped: the active platform's npm is put
    first on PATH and ``npm_config_prefix`` points its global prefix at a
    directory owned by this package alone.

    Follows Separate Use from Creation: constructor requires the context.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, context: InstallContext) -> None:
        """Initialize installer with its collaborators.

        Args:
            context: Platform resolver, layout, runner, progress and classifier.
        """
        self.context = context

    @classmethod
    def create(cls, home: Path | None = None, quiet: bool = False) -> Installer:
        """Factory method for production instantiation.

        Args:
            home: Optional home directory override.
            quiet: Suppress the progress spinner.

        Returns:
            Configured Installer instance.
        """
        return cls(create_context(home=home, quiet=quiet))

    def install_global(self, package_spec: str) -> InstallResult:
        """Install a package globally into its own install directory.

        Args:
            package_spec: Package to install, e.g. ``left-pad`` or ``typescript@5``.

        Returns:
            InstallResult; on failure ``error`` is one of NoActivePlatformError,
            CheckoutError, InstallLaunchFailedError, PackageNotFoundError or
            PackageInstallFailedError.

        Raises:
            InvalidPackageSpecError: If the package specification is empty or malformed.
        """
        package = PackageSpec.parse(package_spec)
        spec = str(package)

        try:
            image = self._checkout_default_image()
            layout = self.context.layout
            install_dir = layout.package_install_directory(layout.home_directory(), package.name)
            command = build_install_command(package, image, install_dir)

            logger.debug("Installing %s with command: %s", spec, command)
            outcome = self._run(command, spec)
        except InstallError as e:
            logger.debug("Install of %s failed: %s", spec, e)
            return InstallResult.failed(spec, e)

        self._log_output(outcome)

        if outcome.success:
            return InstallResult.ok(spec, install_dir)
        return InstallResult.failed(spec, self.context.classifier.classify(spec, outcome.stderr))

    async def install_global_async(self, package_spec: str) -> InstallResult:
        """Run `install_global` in a worker thread as a single awaitable."""
        return await asyncio.to_thread(self.install_global, package_spec)

    def _checkout_default_image(self) -> ToolchainImage:
        """Resolve the default platform and check it out.

        Raises:
            NoActivePlatformError: If no default platform is configured.
            CheckoutError: If the platform can't be checked out.
        """
        platform = self.context.platforms.resolve_default_platform()
        if platform is None:
            raise NoActivePlatformError()
        return self.context.platforms.checkout(platform)

    def _run(self, command: InstallCommand, package: str) -> ProcessOutcome:
        """Run the install command behind a spinner.

        Raises:
            InstallLaunchFailedError: If the process could not be started.
        """
        with spinner(self.context.progress, f"Installing {package}"):
            try:
                return self.context.runner.run(command)
            except OSError as e:
                raise InstallLaunchFailedError(package) from e

    def _log_output(self, outcome: ProcessOutcome) -> None:
        logger.debug("[install stderr]\n%s", outcome.stderr)
        logger.debug("[install stdout]\n%s", outcome.stdout)


def install_global(package_spec: str, context: InstallContext | None = None) -> InstallResult:
    """Install a package globally using the given (or default) context.

    Args:
        package_spec: Package to install.
        context: Install context. Defaults to `create_context()`.

    Returns:
        InstallResult describing success or the typed failure.
    """
    return Installer(context or create_context()).install_global(package_spec)
