# topmark:header:start
#
#   project      : TCInspect
#   file         : inspection_types.py
#   file_relpath : src/tcinspect/cli/commands/inspection_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TCInspect `inspection-types` command.

Announces every diagnostic kind known to the given catalogs as a TeamCity
``inspectionType`` service message. With ``--list``, prints the registered
providers instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tcinspect.cli.config_resolver import resolve_settings_from_click
from tcinspect.cli.errors import TCInspectDataError
from tcinspect.cli.options import common_settings_options
from tcinspect.config.logging import get_logger
from tcinspect.errors import ConfigError, MachineInputError
from tcinspect.registry import ProviderRegistry
from tcinspect.teamcity import TeamCityReporter

if TYPE_CHECKING:
    from tcinspect.cli.console import ConsoleLike
    from tcinspect.config import Settings
    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)


@click.command(
    name="inspection-types",
    help="Emit one inspectionType service message per diagnostic kind in the catalogs.",
)
@click.argument(
    "catalogs",
    metavar="[CATALOG]...",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--no-preprocessor",
    "no_preprocessor",
    is_flag=True,
    default=False,
    help="Do not announce the built-in preprocessor diagnostics.",
)
@click.option(
    "--list",
    "list_providers",
    is_flag=True,
    default=False,
    help="List the registered providers instead of emitting service messages.",
)
@common_settings_options
def inspection_types_command(
    *,
    catalogs: tuple[Path, ...],
    no_preprocessor: bool,
    list_providers: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_paths: tuple[str, ...],
    verbose_messages: bool | None,
) -> None:
    """Announce the inspection types of the given catalogs.

    Args:
        catalogs (tuple[Path, ...]): TOML diagnostic catalogs, registered in order.
        no_preprocessor (bool): Skip the built-in preprocessor provider.
        list_providers (bool): Print provider names and kind counts only.
        config_files (tuple[Path, ...]): Explicit configuration files.
        no_config (bool): Skip configuration discovery.
        base_paths (tuple[str, ...]): Accepted for parity with ``emit``.
        verbose_messages (bool | None): Describe kinds with their long message.

    Raises:
        TCInspectDataError: If a catalog is malformed or two catalogs share a name.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings: Settings = resolve_settings_from_click(
        config_files=config_files,
        no_config=no_config,
        base_paths=base_paths,
        verbose_messages=verbose_messages,
    )

    try:
        registry = ProviderRegistry.from_catalog_files(
            catalogs, include_preprocessor=not no_preprocessor
        )
    except (ConfigError, MachineInputError, ValueError) as exc:
        raise TCInspectDataError(str(exc)) from exc

    if list_providers:
        for meta in registry.iter_meta():
            count: str = "?" if meta.kind_count is None else str(meta.kind_count)
            console.print(f"{meta.name}\t{count}")
        return

    reporter: TeamCityReporter = TeamCityReporter.to_stdout(settings)
    count_emitted: int = reporter.report_inspection_types(registry)
    logger.info(
        "Announced %d inspection type(s) from %d provider(s)", count_emitted, len(registry)
    )
