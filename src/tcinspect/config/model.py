# topmark:header:start
#
#   project      : TCInspect
#   file         : model.py
#   file_relpath : src/tcinspect/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model and merge policy.

This module defines:
    - `Settings`: an immutable runtime snapshot consumed by the reporters.
    - `MutableSettings`: a mutable builder used while merging config sources; it
      can be frozen into `Settings` and thawed back for edits.

Layering (last wins):
    defaults -> config files (in the given order) -> CLI overrides.

Path semantics:
    Relative ``base_paths`` declared in a config file are anchored to that file's
    directory. CLI-provided base paths are anchored to the invocation CWD.
    Base paths are stored as forward-slash strings because they are compared with
    paths reported by the analysis engine, not with the host filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tcinspect.config.io import (
    extract_tcinspect_table,
    get_bool_value_or_none,
    get_string_list_or_none,
    load_toml_dict,
)
from tcinspect.config.keys import Toml
from tcinspect.config.logging import get_logger
from tcinspect.config.paths import abs_path_from, from_native_separators, is_absolute
from tcinspect.constants import PYPROJECT_TOML_NAME, TCINSPECT_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tcinspect.config.io import TomlTable
    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings for TCInspect.

    Attributes:
        verbose (bool): Report the verbose diagnostic text instead of the short one.
        base_paths (tuple[str, ...]): Base directories used to relativize absolute
            diagnostic file paths, tried in order.
        config_files (tuple[str, ...]): Config sources that contributed to these settings.
    """

    verbose: bool = False
    base_paths: tuple[str, ...] = ()
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableSettings:
        """Return a mutable builder initialized from this snapshot."""
        return MutableSettings(
            verbose=self.verbose,
            base_paths=list(self.base_paths),
            config_files=list(self.config_files),
        )


@dataclass
class MutableSettings:
    """Mutable builder for `Settings`, suitable for config loading and merging.

    Attributes:
        verbose (bool | None): See `Settings`. `None` means "inherit".
        base_paths (list[str] | None): See `Settings`. `None` means "inherit".
        config_files (list[str]): Provenance, accumulated across merges.
    """

    verbose: bool | None = None
    base_paths: list[str] | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new builder by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override values in ``self``. Provenance
        lists are concatenated.
        """
        return MutableSettings(
            verbose=self.verbose if other.verbose is None else other.verbose,
            base_paths=self.base_paths if other.base_paths is None else list(other.base_paths),
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Settings:
        """Freeze to a concrete `Settings`, defaulting unset fields."""
        return Settings(
            verbose=bool(self.verbose),
            base_paths=tuple(self.base_paths or ()),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_toml_table(
        cls,
        table: TomlTable,
        *,
        config_dir: Path | None = None,
        source: str | None = None,
    ) -> MutableSettings:
        """Create a builder from a TCInspect TOML settings table.

        Unknown keys are reported with a warning and ignored.

        Args:
            table (TomlTable): The settings table.
            config_dir (Path | None): Directory that relative ``base_paths`` are
                anchored to; when None they are kept verbatim.
            source (str | None): Provenance label recorded in ``config_files``.

        Returns:
            MutableSettings: Parsed builder.
        """
        for key in sorted(set(table) - Toml.ALL_KEYS):
            logger.warning(
                "Ignoring unknown configuration key '%s' in %s", key, source or "<table>"
            )

        base_paths: list[str] | None = get_string_list_or_none(table, Toml.KEY_BASE_PATHS)
        if base_paths is not None and config_dir is not None:
            base_paths = [_anchor(config_dir, raw) for raw in base_paths]

        return cls(
            verbose=get_bool_value_or_none(table, Toml.KEY_VERBOSE),
            base_paths=base_paths,
            config_files=[source] if source else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings | None:
        """Load a builder from a ``tcinspect.toml`` or ``pyproject.toml`` file.

        Returns:
            MutableSettings | None: The builder, or None when a ``pyproject.toml``
                has no ``[tool.tcinspect]`` table.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable | None = extract_tcinspect_table(path, data)
        if table is None:
            logger.debug("No TCInspect settings in %s", path)
            return None
        return cls.from_toml_table(table, config_dir=path.parent.absolute(), source=str(path))


def _anchor(base: Path, raw: str) -> str:
    """Anchor ``raw`` to ``base`` unless it already looks absolute."""
    normalized: str = from_native_separators(raw)
    if is_absolute(normalized):
        return normalized
    return abs_path_from(base, normalized).as_posix()


def discover_config_files(start: Path) -> list[Path]:
    """Return the config files found in ``start`` (no upward traversal).

    ``pyproject.toml`` comes first so that a dedicated ``tcinspect.toml`` wins.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, TCINSPECT_TOML_NAME):
        candidate: Path = start / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", start, [str(p) for p in found])
    return found


def load_settings(
    config_files: Iterable[Path] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    cwd: Path | None = None,
) -> Settings:
    """Build frozen settings from config files and overrides.

    Args:
        config_files (Iterable[Path] | None): Explicit config files. When None,
            files are discovered in ``cwd``.
        overrides (Mapping[str, Any] | None): CLI/API overrides with the keys
            ``verbose`` (bool | None) and ``base_paths`` (sequence of str | None).
        cwd (Path | None): Invocation directory; defaults to ``Path.cwd()``.

    Returns:
        Settings: The merged immutable settings.

    Raises:
        ConfigError: If a config file is unreadable or malformed.
    """
    here: Path = cwd or Path.cwd()
    files: list[Path] = (
        list(config_files) if config_files is not None else discover_config_files(here)
    )

    merged = MutableSettings()
    for path in files:
        layer: MutableSettings | None = MutableSettings.from_toml_file(path)
        if layer is not None:
            merged = merged.merge_with(layer)

    if overrides:
        raw_bases: Any = overrides.get(Toml.KEY_BASE_PATHS)
        cli_layer = MutableSettings(
            verbose=overrides.get(Toml.KEY_VERBOSE),
            base_paths=[_anchor(here, str(b)) for b in raw_bases] if raw_bases else None,
        )
        merged = merged.merge_with(cli_layer)

    settings: Settings = merged.freeze()
    logger.debug("Resolved settings: %r", settings)
    return settings
