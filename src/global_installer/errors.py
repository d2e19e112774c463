"""Error taxonomy for global package installs.

Every failure the installer reports is an ``InstallError``. Each carries a
user-facing message that says what went wrong and what to do next; the raw
package manager output is only ever logged.
"""

from __future__ import annotations

__all__ = [
    "CheckoutError",
    "InstallError",
    "InstallLaunchFailedError",
    "InvalidPackageSpecError",
    "NoActivePlatformError",
    "PackageError",
    "PackageInstallFailedError",
    "PackageNotFoundError",
    "PlatformConfigError",
]


class InstallError(Exception):
    """Base class for all installer errors."""

    pass


class NoActivePlatformError(InstallError):
    """No default toolchain platform is configured."""

    def __init__(self) -> None:
        super().__init__(
            "Node is not available.\n\n"
            "Set a default platform first, e.g. `global-installer platform set --node 20`."
        )


class CheckoutError(InstallError):
    """The resolved platform could not be turned into a usable toolchain image."""

    pass


class PlatformConfigError(InstallError):
    """The stored default platform could not be read."""

    pass


class InvalidPackageSpecError(InstallError, ValueError):
    """A package specification string could not be parsed."""

    pass


class PackageError(InstallError):
    """Error tied to a specific package specification."""

    message = "Could not install package '{package}'"

    def __init__(self, package: str) -> None:
        self.package = package
        super().__init__(self.message.format(package=package))


class InstallLaunchFailedError(PackageError):
    """The package manager process could not be started."""

    message = (
        "Could not start the package manager to install '{package}'.\n\n"
        "Please confirm the active platform includes npm."
    )


class PackageNotFoundError(PackageError):
    """The package manager reported that the package does not exist."""

    message = (
        "Could not find package '{package}'.\n\n"
        "Please verify the requested package name."
    )


class PackageInstallFailedError(PackageError):
    """The package manager exited with a failure status."""

    message = (
        "Could not install package '{package}'.\n\n"
        "Please confirm the package is valid and run with `--verbose` for more diagnostics."
    )
