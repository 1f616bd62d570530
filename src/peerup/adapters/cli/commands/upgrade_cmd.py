"""Upgrade command: report outdated components and print the install command.

Contents:
    * :func:`cli_upgrade` - resolve upgrades for a project's ``package.json``.

The command never installs anything; it prints the package-manager command
line that would apply the upgrade.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import lib_log_rich.runtime
import orjson
import rich_click as click

from ....application.ports import OutputBox
from ....application.upgrade import plan_upgrade
from ....domain.enums import OutputFormat
from ....domain.errors import (
    ConfigurationError,
    MalformedVersionError,
    ManifestError,
    RegistryError,
    UnknownComponentError,
)
from ....domain.models import Manifest, UpgradeCandidate
from ...config.settings import PeerupSettings
from ...manifest import MANIFEST_FILENAME, install_command
from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from ....composition import AppServices

logger = logging.getLogger(__name__)


def _fail(exc: Exception, log_message: str, user_message: str, *, exit_code: ExitCode) -> NoReturn:
    """Log ``exc``, print a one-line error and exit with ``exit_code``.

    Raises:
        SystemExit: Always.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code) from exc


def _discard_section(*, title: str, color: str, text: str) -> None:
    """Output box for machine-readable runs: the report is not shown."""


async def _resolve(
    services: AppServices,
    settings: PeerupSettings,
    manifest: Manifest,
    output_box: OutputBox,
    *,
    components: Sequence[str],
    select_all: bool,
    ignore: Sequence[str],
) -> list[UpgradeCandidate] | None:
    registry = services.open_registry(settings.registry)
    try:
        return await plan_upgrade(
            manifest,
            settings.upgrade.to_scope(),
            registry,
            output_box,
            components=components,
            select_all=select_all,
            ignore=ignore,
        )
    finally:
        await registry.aclose()


def _echo_result(
    services: AppServices,
    manifest: Manifest,
    result: list[UpgradeCandidate],
    output_format: OutputFormat,
) -> None:
    if output_format is OutputFormat.JSON:
        payload = [candidate.to_dict() for candidate in result]
        click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
        return

    if not result:
        click.echo("\nAll components are up to date.")
        return

    manager = services.detect_package_manager(manifest.project_dir)
    click.echo("\nRun the following command to upgrade:")
    click.echo(f"  {install_command(manager, result)}")


@click.command("upgrade", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("components", nargs=-1)
@click.option("--all", "select_all", is_flag=True, default=False, help="Check every installed component")
@click.option(
    "--package-path",
    type=click.Path(path_type=Path),
    default=None,
    help="package.json to inspect, or the directory holding it (default: ./package.json)",
)
@click.option(
    "--ignore",
    "ignored",
    multiple=True,
    metavar="PACKAGE",
    help="Leave a package out of the upgrade (repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Human-readable report or the upgrade list as JSON",
)
@click.pass_context
def cli_upgrade(
    ctx: click.Context,
    components: tuple[str, ...],
    select_all: bool,
    package_path: Path | None,
    ignored: tuple[str, ...],
    output_format: str,
) -> None:
    r"""Report outdated components and the peer dependencies they require.

    COMPONENTS are component names with or without the package prefix
    (``button`` or ``@nextui-org/button``). Without names every installed
    component is checked. When the umbrella package is installed, only it
    and its peers are checked.

    \b
    Exit codes:
    - 2:  package.json not found or unreadable
    - 3:  no components installed
    - 22: unknown component or unusable version
    - 69: registry unavailable
    - 78: invalid [upgrade] or [registry] configuration
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    fmt = OutputFormat(output_format.lower())
    manifest_path = package_path if package_path is not None else Path.cwd() / MANIFEST_FILENAME

    extra = {"command": "upgrade", "components": list(components), "all": select_all, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-upgrade", extra=extra):
        try:
            settings = services.load_settings_from_dict(cli_ctx.config.as_dict())
        except ConfigurationError as exc:
            _fail(exc, "Invalid configuration", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)

        try:
            manifest = services.read_manifest(manifest_path)
        except ManifestError as exc:
            _fail(exc, "Cannot read manifest", "Cannot read package.json", exit_code=ExitCode.FILE_NOT_FOUND)

        output_box: OutputBox = services.output_box if fmt is OutputFormat.HUMAN else _discard_section
        logger.info("Resolving upgrades", extra={"manifest": str(manifest.path)})
        try:
            result = asyncio.run(
                _resolve(
                    services,
                    settings,
                    manifest,
                    output_box,
                    components=components,
                    select_all=select_all,
                    ignore=ignored,
                )
            )
        except UnknownComponentError as exc:
            _fail(exc, "Unknown components requested", "Invalid components", exit_code=ExitCode.INVALID_ARGUMENT)
        except MalformedVersionError as exc:
            _fail(exc, "Unusable version", "Cannot compare versions", exit_code=ExitCode.INVALID_ARGUMENT)
        except RegistryError as exc:
            _fail(exc, "Registry lookup failed", "Registry unavailable", exit_code=ExitCode.REGISTRY_UNAVAILABLE)

        if result is None:
            prefix = settings.upgrade.component_prefix
            logger.error("No components installed", extra={"manifest": str(manifest.path)})
            click.echo(f"\nError: No {prefix} components detected in {manifest.path}", err=True)
            raise SystemExit(ExitCode.NO_COMPONENTS)

        logger.info("Upgrade plan ready", extra={"upgrades": len(result)})
        _echo_result(services, manifest, result, fmt)


__all__ = ["cli_upgrade"]
