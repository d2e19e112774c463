"""CLI commands using Typer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from global_installer.context import InstallContext

import typer
from pydantic import ValidationError

from global_installer import __version__
from global_installer.console import Output, configure_logging
from global_installer.context import create_context
from global_installer.errors import InstallError, InvalidPackageSpecError
from global_installer.install import Installer
from global_installer.platform import PlatformSpec
from global_installer.protocols import PlatformStore

app = typer.Typer(
    name="global-installer",
    help="Install npm packages globally, each into its own isolated directory",
    no_args_is_help=True,
)

platform_app = typer.Typer(help="Manage the default platform")
config_app = typer.Typer(help="Configuration commands")

app.add_typer(platform_app, name="platform")
app.add_typer(config_app, name="config")

output = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"global-installer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logs, including package manager output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Install npm packages globally, each into its own isolated directory."""
    configure_logging(verbose)


# ============================================================================
# Install Commands
# ============================================================================


@app.command()
def install(
    package: Annotated[str, typer.Argument(help="Package to install, e.g. typescript@5")],
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Hide the progress spinner")] = False,
    _context=None,
) -> None:
    """Install a package globally into its own directory."""
    ctx = _context or create_context(quiet=quiet)

    try:
        result = Installer(ctx).install_global(package)
    except InvalidPackageSpecError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e

    if not result.success:
        output.show_error(result.message or f"Could not install package '{package}'")
        raise typer.Exit(1)

    output.show_success(f"Installed {result.package} into {result.installed_path}")


# ============================================================================
# Platform Commands
# ============================================================================


@platform_app.command("set")
def platform_set(
    node: Annotated[str, typer.Option("--node", "-n", help="Node version")],
    npm: Annotated[str | None, typer.Option("--npm", help="Pinned npm version")] = None,
    _context=None,
) -> None:
    """Set the default platform used for installs."""
    ctx = _context or create_context()

    try:
        platform = PlatformSpec(node=node, npm=npm)
    except ValidationError as e:
        output.show_error(f"Invalid platform: {e}")
        raise typer.Exit(1) from e

    if not isinstance(ctx.platforms, PlatformStore):
        output.show_error("The configured platform resolver cannot store a default platform")
        raise typer.Exit(1)

    ctx.platforms.save_default_platform(platform)
    output.show_success(f"Default platform set to {platform}")


@platform_app.command("show")
def platform_show(
    _context=None,
) -> None:
    """Show the default platform."""
    ctx = _context or create_context()

    try:
        platform = ctx.platforms.resolve_default_platform()
    except InstallError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e

    if platform is None:
        output.show_warning("No default platform configured.")
        output.show_info("Run: global-installer platform set --node <version>")
        return
    output.show_platform(platform)


# ============================================================================
# Config Commands
# ============================================================================


def _describe_layout(ctx: InstallContext) -> list[tuple[str, str]]:
    """Collect the directories worth showing to the user."""
    home = ctx.layout.home_directory()
    rows = [("Home directory", str(home))]
    if hasattr(ctx.layout, "platform_file"):
        rows.append(("Platform file", str(ctx.layout.platform_file(home))))
    if hasattr(ctx.layout, "packages_directory"):
        rows.append(("Packages directory", str(ctx.layout.packages_directory(home))))
    return rows


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()

    output.console.print("\n[bold]Configuration[/bold]")
    for label, value in _describe_layout(ctx):
        output.console.print(f"  {label}: {value}")


if __name__ == "__main__":
    app()
