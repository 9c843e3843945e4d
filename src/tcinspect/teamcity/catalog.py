# topmark:header:start
#
#   project      : TCInspect
#   file         : catalog.py
#   file_relpath : src/tcinspect/teamcity/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emission of the TeamCity inspection type catalog.

TeamCity groups reported inspections by *inspection type*. Before (or instead
of) reporting findings, every diagnostic kind the analyzer can produce is
announced with an ``inspectionType`` service message.

Providers describe their diagnostic kinds into an `InspectionTypeLogger`, a
one-shot [`DescriptionSink`][tcinspect.diagnostic.types.DescriptionSink] that
formats each description immediately. Plain text sent to it is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from tcinspect.config.logging import get_logger
from tcinspect.constants import INSPECTION_CATEGORY_PREFIX
from tcinspect.teamcity.messages import AttributeKey, MessageName, format_message

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tcinspect.config.logging import TCInspectLogger
    from tcinspect.config.model import Settings
    from tcinspect.diagnostic.model import DiagnosticDescription
    from tcinspect.diagnostic.types import DiagnosticProvider

logger: TCInspectLogger = get_logger(__name__)


@dataclass
class InspectionTypeLogger:
    """Description sink writing ``inspectionType`` service messages.

    Attributes:
        stream (TextIO): Destination of the service message lines.
        verbose (bool): Use the verbose text as description.
        count (int): Number of lines written so far.
    """

    stream: TextIO
    verbose: bool = False
    count: int = 0

    def accept_plain_text(self, text: str) -> None:
        """Drop free-form text; only descriptions are part of the catalog."""
        logger.trace("Ignoring plain text while describing diagnostics: %r", text)

    def accept_description(self, description: DiagnosticDescription) -> None:
        """Write the ``inspectionType`` message for ``description``."""
        line: str = format_message(
            MessageName.INSPECTION_TYPE,
            {
                AttributeKey.ID: description.kind,
                AttributeKey.NAME: description.kind,
                AttributeKey.DESCRIPTION: (
                    description.verbose if self.verbose else description.short
                ),
                AttributeKey.CATEGORY: (
                    INSPECTION_CATEGORY_PREFIX + description.severity.display_name
                ),
            },
        )
        self.stream.write(line + "\n")
        self.stream.flush()
        self.count += 1


def emit_inspection_types(
    providers: Iterable[DiagnosticProvider],
    *,
    settings: Settings,
    stream: TextIO,
) -> int:
    """Announce every diagnostic kind of ``providers`` on ``stream``.

    Providers are asked in iteration order; each description is written as soon
    as it is received.

    Args:
        providers (Iterable[DiagnosticProvider]): Checks and other components able
            to describe their diagnostics.
        settings (Settings): Report settings; ``verbose`` selects the description text.
        stream (TextIO): Output stream.

    Returns:
        int: Number of ``inspectionType`` lines written.
    """
    sink = InspectionTypeLogger(stream=stream, verbose=settings.verbose)
    for provider in providers:
        before: int = sink.count
        provider.describe_diagnostics(sink, settings)
        logger.debug(
            "Provider %s described %d diagnostic kinds", provider.name, sink.count - before
        )
    return sink.count
