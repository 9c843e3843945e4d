# topmark:header:start
#
#   project      : TCInspect
#   file         : catalog.py
#   file_relpath : src/tcinspect/diagnostic/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static diagnostic providers backed by catalog data.

A *catalog* lists the diagnostic kinds a check can report. Catalogs are
usually loaded from TOML files:

```toml
name = "nullpointer"

[[diagnostic]]
id = "nullPointer"
severity = "error"
short = "Null pointer dereference"
verbose = "Possible null pointer dereference: ptr"
cwe = 476
```

`PREPROCESSOR_PROVIDER` describes the diagnostics raised while preprocessing,
which do not belong to any check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from tcinspect.config.io import load_toml_dict
from tcinspect.config.keys import CatalogToml
from tcinspect.config.logging import get_logger
from tcinspect.diagnostic.model import DiagnosticDescription, Severity
from tcinspect.errors import MachineInputError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from tcinspect.config.logging import TCInspectLogger
    from tcinspect.config.model import Settings
    from tcinspect.diagnostic.types import DescriptionSink

logger: TCInspectLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogProvider:
    """Diagnostic provider describing a fixed list of diagnostic kinds.

    Attributes:
        name (str): Provider name.
        descriptions (tuple[DiagnosticDescription, ...]): Described kinds, in order.
    """

    name: str
    descriptions: tuple[DiagnosticDescription, ...]

    def describe_diagnostics(self, sink: DescriptionSink, settings: Settings) -> None:
        """Describe every catalog entry into ``sink``."""
        for description in self.descriptions:
            sink.accept_description(description)

    @classmethod
    def from_toml_table(cls, table: Mapping[str, Any], *, default_name: str) -> CatalogProvider:
        """Build a provider from a parsed catalog table.

        Args:
            table (Mapping[str, Any]): Parsed catalog document.
            default_name (str): Name used when the catalog has no ``name`` key.

        Returns:
            CatalogProvider: The provider.

        Raises:
            MachineInputError: If an entry is malformed.
        """
        name_any: Any = table.get(CatalogToml.KEY_NAME, default_name)
        if not isinstance(name_any, str) or not name_any:
            raise MachineInputError(f"catalog '{CatalogToml.KEY_NAME}' must be a non-empty string")

        entries_any: Any = table.get(CatalogToml.SECTION_DIAGNOSTIC, [])
        if not isinstance(entries_any, list):
            raise MachineInputError(
                f"catalog '{CatalogToml.SECTION_DIAGNOSTIC}' must be an array of tables"
            )

        descriptions: list[DiagnosticDescription] = []
        for index, entry in enumerate(cast("list[Any]", entries_any), start=1):
            if not isinstance(entry, dict):
                raise MachineInputError(f"catalog {name_any}: entry {index} is not a table")
            descriptions.append(_description_from_entry(cast("dict[str, Any]", entry), index))
        return cls(name=name_any, descriptions=tuple(descriptions))

    @classmethod
    def from_toml_file(cls, path: Path) -> CatalogProvider:
        """Load a provider from a TOML catalog file (named after the file stem by default)."""
        provider: CatalogProvider = cls.from_toml_table(
            load_toml_dict(path), default_name=path.stem
        )
        logger.debug(
            "Loaded catalog %s with %d entries from %s",
            provider.name,
            len(provider.descriptions),
            path,
        )
        return provider


def _description_from_entry(entry: dict[str, Any], index: int) -> DiagnosticDescription:
    kind: Any = entry.get(CatalogToml.KEY_ID)
    if not isinstance(kind, str) or not kind:
        raise MachineInputError(f"catalog entry {index}: '{CatalogToml.KEY_ID}' is required")
    where: str = f"catalog entry {index} ({kind})"

    short: Any = entry.get(CatalogToml.KEY_SHORT)
    if not isinstance(short, str):
        raise MachineInputError(f"{where}: '{CatalogToml.KEY_SHORT}' is required")

    verbose: Any = entry.get(CatalogToml.KEY_VERBOSE, "")
    if not isinstance(verbose, str):
        raise MachineInputError(f"{where}: '{CatalogToml.KEY_VERBOSE}' must be a string")

    cwe: Any = entry.get(CatalogToml.KEY_CWE, 0)
    if isinstance(cwe, bool) or not isinstance(cwe, int) or cwe < 0:
        raise MachineInputError(f"{where}: '{CatalogToml.KEY_CWE}' must be a non-negative integer")

    raw_severity: Any = entry.get(CatalogToml.KEY_SEVERITY, Severity.NONE.key)
    severity: Severity | None = (
        Severity.parse(raw_severity) if isinstance(raw_severity, str) else None
    )
    if severity is None:
        logger.warning("%s: unknown severity %r, using 'none'", where, raw_severity)
        severity = Severity.NONE

    return DiagnosticDescription(
        kind=kind, severity=severity, short=short, verbose=verbose, cwe=cwe
    )


PREPROCESSOR_PROVIDER: CatalogProvider = CatalogProvider(
    name="preprocessor",
    descriptions=(
        DiagnosticDescription(
            kind="missingInclude",
            severity=Severity.INFORMATION,
            short='Include file: "" not found.',
        ),
        DiagnosticDescription(
            kind="missingIncludeSystem",
            severity=Severity.INFORMATION,
            short=(
                "Include file: <> not found. Please note: Cppcheck does not need standard "
                "library headers to get proper results."
            ),
        ),
        DiagnosticDescription(
            kind="preprocessorErrorDirective",
            severity=Severity.ERROR,
            short="#error message",
        ),
    ),
)
