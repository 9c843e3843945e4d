# topmark:header:start
#
#   project      : TCInspect
#   file         : options.py
#   file_relpath : src/tcinspect/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based TCInspect CLI.

This module centralizes reusable options (verbosity, settings overrides) and
their resolution logic, so commands and groups can stay thin. The helpers here
are Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from tcinspect.cli.errors import TCInspectUsageError
from tcinspect.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        TCInspectUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        The --verbose and --quiet options are mutually exclusive.
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TCInspectUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors on stderr.",
    )(f)
    return f


def common_settings_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply options that override configuration file settings.

    Adds ``--config``, ``--no-config``, ``--base-path`` and
    ``--verbose-messages/--short-messages``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--verbose-messages/--short-messages",
        "verbose_messages",
        default=None,
        help="Report the long or the short form of each diagnostic message.",
    )(f)
    f = click.option(
        "--base-path",
        "base_paths",
        multiple=True,
        type=click.Path(file_okay=False, dir_okay=True, path_type=str),
        help="Directory that absolute report paths are made relative to (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore configuration files in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Read settings from this TOML file (repeatable, later files win).",
    )(f)
    return f
