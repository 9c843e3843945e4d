# topmark:header:start
#
#   project      : TCInspect
#   file         : version.py
#   file_relpath : src/tcinspect/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TCInspect `version` command.

Prints the current TCInspect version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tcinspect.constants import TCINSPECT_VERSION

if TYPE_CHECKING:
    from tcinspect.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TCInspect.",
)
def version_command() -> None:
    """Show the current version of TCInspect (PEP 440)."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(TCINSPECT_VERSION)
