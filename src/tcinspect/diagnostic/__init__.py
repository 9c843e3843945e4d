# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and reporting contracts.

Design:
    - Findings are represented by immutable `Diagnostic` instances.
    - Diagnostic kinds are announced as `DiagnosticDescription` instances by
      `DiagnosticProvider` implementations such as `CatalogProvider`.

Machine input:
    NDJSON decoding of diagnostics lives under
    [`tcinspect.diagnostic.machine`][tcinspect.diagnostic.machine].
"""

from __future__ import annotations

from tcinspect.diagnostic.model import Diagnostic, DiagnosticDescription, FileLocation, Severity
from tcinspect.diagnostic.types import DescriptionSink, DiagnosticProvider, Reporter

__all__ = [
    "DescriptionSink",
    "Diagnostic",
    "DiagnosticDescription",
    "DiagnosticProvider",
    "FileLocation",
    "Reporter",
    "Severity",
]
