# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: settings model, TOML loading, path helpers and logging."""

from __future__ import annotations

from tcinspect.config.model import MutableSettings, Settings, discover_config_files, load_settings

__all__ = [
    "MutableSettings",
    "Settings",
    "discover_config_files",
    "load_settings",
]
