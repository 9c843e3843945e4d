# topmark:header:start
#
#   project      : TCInspect
#   file         : emit.py
#   file_relpath : src/tcinspect/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TCInspect `emit` command.

Reads analyzer results as NDJSON (one record per line) and writes the matching
TeamCity service messages to stdout. Records are processed as they are read, so
a long-running analyzer can pipe its output straight into this command.

Examples:
    Convert a results file:

      $ tcinspect emit results.ndjson

    Stream from an analyzer, reporting paths relative to the checkout:

      $ analyzer --ndjson | tcinspect emit --base-path "$PWD"
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from tcinspect.cli.config_resolver import resolve_settings_from_click
from tcinspect.cli.errors import (
    TCInspectDataError,
    TCInspectFileNotFoundError,
    TCInspectIOError,
)
from tcinspect.cli.options import common_settings_options
from tcinspect.config.logging import get_logger
from tcinspect.diagnostic.machine import dispatch_record, iter_input_records
from tcinspect.errors import MachineInputError
from tcinspect.teamcity import TeamCityReporter

if TYPE_CHECKING:
    from tcinspect.config import Settings
    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)


@click.command(
    name="emit",
    help="Convert NDJSON analyzer results (file or STDIN) into TeamCity service messages.",
)
@click.argument(
    "input_path",
    metavar="[INPUT]",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=str),
    default="-",
)
@common_settings_options
def emit_command(
    *,
    input_path: str,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_paths: tuple[str, ...],
    verbose_messages: bool | None,
) -> None:
    """Convert NDJSON analyzer results into TeamCity service messages.

    Args:
        input_path (str): NDJSON file to read (``-`` for STDIN).
        config_files (tuple[Path, ...]): Explicit configuration files.
        no_config (bool): Skip configuration discovery.
        base_paths (tuple[str, ...]): Base directories for relative report paths.
        verbose_messages (bool | None): Report long messages instead of short ones.

    Raises:
        TCInspectDataError: If a record is not valid UTF-8 JSON or is malformed.
        TCInspectFileNotFoundError: If ``input_path`` does not exist.
        TCInspectIOError: If the input cannot be read.
    """
    settings: Settings = resolve_settings_from_click(
        config_files=config_files,
        no_config=no_config,
        base_paths=base_paths,
        verbose_messages=verbose_messages,
    )
    reporter: TeamCityReporter = TeamCityReporter.to_stdout(settings)

    records: int
    if input_path == "-":
        records = _convert(sys.stdin, "<stdin>", reporter)
    else:
        path = Path(input_path)
        try:
            handle: TextIO = path.open(encoding="utf-8")
        except FileNotFoundError as exc:
            raise TCInspectFileNotFoundError(f"{input_path}: no such file") from exc
        except OSError as exc:
            raise TCInspectIOError(f"{input_path}: {exc}") from exc
        with handle:
            records = _convert(handle, input_path, reporter)

    logger.info(
        "Processed %d record(s): %d inspection(s) emitted, %d duplicate(s) suppressed",
        records,
        reporter.emitted,
        reporter.suppressed,
    )


def _convert(stream: TextIO, source: str, reporter: TeamCityReporter) -> int:
    """Feed every record of ``stream`` to ``reporter``; return the record count."""
    logger.debug("Reading records from %s", source)
    records = 0
    try:
        for record in iter_input_records(stream):
            dispatch_record(record, reporter)
            records += 1
    except (MachineInputError, UnicodeDecodeError) as exc:
        raise TCInspectDataError(f"{source}: {exc}") from exc
    except OSError as exc:
        raise TCInspectIOError(f"{source}: {exc}") from exc
    return records
