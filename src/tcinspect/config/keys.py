# topmark:header:start
#
#   project      : TCInspect
#   file         : keys.py
#   file_relpath : src/tcinspect/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TCInspect configuration.

These constants define the external configuration schema as it appears in
``tcinspect.toml`` and in ``[tool.tcinspect]`` inside ``pyproject.toml``.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI option names are defined separately in the CLI layer.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TCInspect configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TCINSPECT: Final[str] = "tcinspect"

    # Report text selection
    KEY_VERBOSE: Final[str] = "verbose"

    # Base directories for relative path computation
    KEY_BASE_PATHS: Final[str] = "base_paths"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_VERBOSE, KEY_BASE_PATHS})


class CatalogToml:
    """Keys of diagnostic catalog files (see `tcinspect.diagnostic.catalog`)."""

    KEY_NAME: Final[str] = "name"
    SECTION_DIAGNOSTIC: Final[str] = "diagnostic"

    KEY_ID: Final[str] = "id"
    KEY_SEVERITY: Final[str] = "severity"
    KEY_SHORT: Final[str] = "short"
    KEY_VERBOSE: Final[str] = "verbose"
    KEY_CWE: Final[str] = "cwe"
