# topmark:header:start
#
#   project      : TCInspect
#   file         : types.py
#   file_relpath : src/tcinspect/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural interfaces between the analysis pipeline and the reporters.

This module defines small Protocols so that reporters and diagnostic providers
can be combined without depending on concrete classes:

- `Reporter`: the reporting contract driven by the analysis pipeline.
- `DescriptionSink`: receives descriptions of diagnostic kinds.
- `DiagnosticProvider`: a component (check, preprocessor, ...) that can
  enumerate every diagnostic kind it may report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tcinspect.config.model import Settings
    from tcinspect.diagnostic.model import Diagnostic, DiagnosticDescription


class Reporter(Protocol):
    """Reporting contract consumed from the analysis pipeline."""

    def report_plain_message(self, text: str) -> None:
        """Report a free-form message."""
        ...

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Report a single finding."""
        ...

    def report_progress(self, subject: str, stage: str, value: int = 0) -> None:
        """Report that processing of ``subject`` reached ``stage``."""
        ...


class DescriptionSink(Protocol):
    """Receiver of diagnostic kind descriptions."""

    def accept_plain_text(self, text: str) -> None:
        """Receive a free-form message emitted while describing."""
        ...

    def accept_description(self, description: DiagnosticDescription) -> None:
        """Receive the description of one diagnostic kind."""
        ...


class DiagnosticProvider(Protocol):
    """A component able to enumerate the diagnostic kinds it can report."""

    @property
    def name(self) -> str:
        """Stable provider name (used for registration)."""
        ...

    def describe_diagnostics(self, sink: DescriptionSink, settings: Settings) -> None:
        """Describe every diagnostic kind this provider can report into ``sink``."""
        ...
