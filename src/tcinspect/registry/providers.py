# topmark:header:start
#
#   project      : TCInspect
#   file         : providers.py
#   file_relpath : src/tcinspect/registry/providers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of diagnostic providers.

A `ProviderRegistry` is an ordinary, ordered collection of
[`DiagnosticProvider`][tcinspect.diagnostic.types.DiagnosticProvider] instances
keyed by name. It is *not* process-global: callers build one, populate it (for
instance from catalog files) and pass it (it is iterable) to
[`TeamCityReporter.report_inspection_types`][tcinspect.teamcity.sink.TeamCityReporter.report_inspection_types].

Typical usage:
    ```python
    registry = ProviderRegistry.from_catalog_files(paths)
    reporter.report_inspection_types(registry)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from tcinspect.config.logging import get_logger
from tcinspect.diagnostic.catalog import PREPROCESSOR_PROVIDER, CatalogProvider

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from pathlib import Path

    from tcinspect.config.logging import TCInspectLogger
    from tcinspect.diagnostic.types import DiagnosticProvider

logger: TCInspectLogger = get_logger(__name__)


@dataclass(frozen=True)
class ProviderMeta:
    """Stable, serializable metadata about a registered provider."""

    name: str
    kind_count: int | None = None


class ProviderRegistry:
    """Ordered name -> provider mapping with registration helpers.

    Providers are iterated in registration order. Re-registering a name replaces
    the provider in place (keeping its position) only when ``replace=True``.
    """

    def __init__(self, providers: Iterable[DiagnosticProvider] = ()) -> None:
        self._providers: dict[str, DiagnosticProvider] = {}
        for provider in providers:
            self.register(provider)

    @classmethod
    def from_catalog_files(
        cls,
        paths: Iterable[Path],
        *,
        include_preprocessor: bool = True,
    ) -> ProviderRegistry:
        """Build a registry from TOML catalog files.

        Args:
            paths (Iterable[Path]): Catalog files, registered in order.
            include_preprocessor (bool): Append the built-in preprocessor provider.

        Returns:
            ProviderRegistry: The populated registry.

        Raises:
            ConfigError: If a catalog file cannot be read or parsed.
            MachineInputError: If a catalog entry is malformed.
            ValueError: If two catalogs share a name.
        """
        registry = cls()
        for path in paths:
            registry.register(CatalogProvider.from_toml_file(path))
        if include_preprocessor:
            registry.register(PREPROCESSOR_PROVIDER)
        return registry

    def register(self, provider: DiagnosticProvider, *, replace: bool = False) -> None:
        """Register ``provider`` under its name.

        Raises:
            ValueError: If the name is already registered and ``replace`` is False.
        """
        if provider.name in self._providers and not replace:
            raise ValueError(f"Diagnostic provider '{provider.name}' is already registered")
        self._providers[provider.name] = provider
        logger.debug("Registered diagnostic provider %s", provider.name)

    def unregister(self, name: str) -> bool:
        """Remove a provider by name.

        Returns:
            bool: True if a provider was removed.
        """
        removed = self._providers.pop(name, None) is not None
        if removed:
            logger.debug("Unregistered diagnostic provider %s", name)
        return removed

    def names(self) -> tuple[str, ...]:
        """Return registered provider names in registration order."""
        return tuple(self._providers)

    def get(self, name: str) -> DiagnosticProvider | None:
        """Return a provider by name, or None."""
        return self._providers.get(name)

    def as_mapping(self) -> Mapping[str, DiagnosticProvider]:
        """Return a read-only view of the registered providers."""
        return MappingProxyType(self._providers)

    def iter_meta(self) -> Iterator[ProviderMeta]:
        """Iterate over metadata for registered providers.

        ``kind_count`` is filled in for catalog-backed providers only.
        """
        for name, provider in self._providers.items():
            count = len(provider.descriptions) if isinstance(provider, CatalogProvider) else None
            yield ProviderMeta(name=name, kind_count=count)

    def __iter__(self) -> Iterator[DiagnosticProvider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers
