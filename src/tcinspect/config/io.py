# topmark:header:start
#
#   project      : TCInspect
#   file         : io.py
#   file_relpath : src/tcinspect/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike the
lenient value getters, the file loader raises
[`ConfigError`][tcinspect.errors.ConfigError] for unreadable or malformed files:
a CI report built from a silently ignored configuration would misplace every
inspection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tcinspect.config.keys import Toml
from tcinspect.config.logging import get_logger
from tcinspect.constants import PYPROJECT_TOML_NAME
from tcinspect.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from tcinspect.config.logging import TCInspectLogger

TomlTable = dict[str, Any]

logger: TCInspectLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read TOML file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tcinspect_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the TCInspect settings table of a parsed config file.

    ``pyproject.toml`` files contribute their ``[tool.tcinspect]`` table (or
    nothing); any other file is a dedicated config whose top-level table is used
    as is.

    Args:
        path (Path): Path the data was loaded from.
        data (TomlTable): Parsed TOML content.

    Returns:
        TomlTable | None: The settings table, or None if the file has none.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table: Any = cast("dict[str, Any]", tool).get(Toml.SECTION_TCINSPECT)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(
            f"[{Toml.SECTION_TOOL}.{Toml.SECTION_TCINSPECT}] in {path} must be a table"
        )
    return cast("TomlTable", table)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {type(value).__name__}")


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str] | None: The list, or ``None`` when absent.

    Raises:
        ConfigError: If the value is present but not a list of strings.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigError(f"'{key}' must be a list of strings")
