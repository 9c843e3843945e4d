# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registries of TCInspect plug-in components."""

from __future__ import annotations

from tcinspect.registry.providers import ProviderMeta, ProviderRegistry

__all__ = [
    "ProviderMeta",
    "ProviderRegistry",
]
