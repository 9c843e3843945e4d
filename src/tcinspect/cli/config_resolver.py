# topmark:header:start
#
#   project      : TCInspect
#   file         : config_resolver.py
#   file_relpath : src/tcinspect/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for resolving TCInspect settings from Click parameters.

This module bridges CLI parsing and the configuration layer: it turns the
options added by
[`common_settings_options`][tcinspect.cli.options.common_settings_options]
into a frozen [`Settings`][tcinspect.config.Settings] snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tcinspect.cli.errors import TCInspectConfigError
from tcinspect.config import load_settings
from tcinspect.config.keys import Toml
from tcinspect.config.logging import get_logger
from tcinspect.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from tcinspect.config import Settings
    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)


def resolve_settings_from_click(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_paths: tuple[str, ...],
    verbose_messages: bool | None,
) -> Settings:
    """Build [`Settings`][tcinspect.config.Settings] from Click parameters.

    Resolution order (lowest → highest precedence):
      1. **Defaults** (short messages, no base paths).
      2. **Discovered project configs** in the working directory, unless
         ``--no-config`` or ``--config`` is given: ``pyproject.toml``
         (``[tool.tcinspect]``) first, then ``tcinspect.toml``.
      3. **Explicit config files** passed via ``--config``, merged in order.
      4. **CLI overrides** (``--base-path``, ``--verbose-messages``).

    Args:
        config_files (tuple[Path, ...]): Files passed via ``--config``.
        no_config (bool): If True, skip discovery in the working directory.
        base_paths (tuple[str, ...]): Directories passed via ``--base-path``.
        verbose_messages (bool | None): Tri-state message verbosity override.

    Returns:
        Settings: The resolved immutable settings.

    Raises:
        TCInspectConfigError: If a configuration file is unreadable or malformed.
    """
    files: list[Path] | None
    if config_files:
        files = list(config_files)
    elif no_config:
        files = []
    else:
        files = None

    overrides: dict[str, Any] = {
        Toml.KEY_VERBOSE: verbose_messages,
        Toml.KEY_BASE_PATHS: list(base_paths) or None,
    }
    logger.debug("CLI settings overrides: %r (config files: %r)", overrides, files)

    try:
        return load_settings(files, overrides=overrides)
    except ConfigError as exc:
        raise TCInspectConfigError(str(exc)) from exc
