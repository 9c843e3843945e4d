# topmark:header:start
#
#   project      : TCInspect
#   file         : main.py
#   file_relpath : src/tcinspect/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the TCInspect CLI.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``log_level``: logging level for stderr diagnostics (``TCINSPECT_LOG_LEVEL``
  wins over ``-v``/``-q``).
- ``console``: the [`ClickConsole`][tcinspect.cli.console.ClickConsole] used for
  user-facing output.

Service messages are never written through the console or the logger; commands
create a [`TeamCityReporter`][tcinspect.teamcity.TeamCityReporter] for them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tcinspect.cli.commands.emit import emit_command
from tcinspect.cli.commands.inspection_types import inspection_types_command
from tcinspect.cli.commands.version import version_command
from tcinspect.cli.console import ClickConsole
from tcinspect.cli.options import common_verbose_options, resolve_verbosity
from tcinspect.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tcinspect.cli.console import ConsoleLike
    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_cli if level_env is None else level_env
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["console"] = ClickConsole(enable_color=ctx.color is not False)
    logger.debug("CLI logging level: %d (env override: %s)", level, level_env is not None)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TCInspect: report static analysis results as TeamCity service messages.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the TCInspect CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tcinspect emit [INPUT]' to convert analyzer results.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(emit_command)

cli.add_command(inspection_types_command)

if __name__ == "__main__":
    cli()
