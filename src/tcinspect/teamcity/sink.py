# topmark:header:start
#
#   project      : TCInspect
#   file         : sink.py
#   file_relpath : src/tcinspect/teamcity/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporter that writes TeamCity service messages.

`TeamCityReporter` implements the [`Reporter`][tcinspect.diagnostic.types.Reporter]
contract on top of [`format_message`][tcinspect.teamcity.messages.format_message]:

- plain messages become ``message`` service messages;
- progress events become ``progressMessage`` service messages, but only when the
  ``(subject, stage)`` pair differs from the previously emitted one;
- diagnostics become ``inspection`` service messages, each distinct diagnostic
  at most once per reporter instance.

Each message is written as one line and flushed immediately. Write failures on
the output stream are not handled here.

See https://www.jetbrains.com/help/teamcity/service-messages.html#Reporting+Inspections
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TextIO

from tcinspect.config.logging import get_logger
from tcinspect.config.paths import from_native_separators, get_relative_path, is_absolute
from tcinspect.constants import INTERNAL_FILE_MARKER
from tcinspect.diagnostic.model import Severity
from tcinspect.teamcity.catalog import emit_inspection_types
from tcinspect.teamcity.messages import AttributeKey, MessageName, format_message

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tcinspect.config.logging import TCInspectLogger
    from tcinspect.config.model import Settings
    from tcinspect.diagnostic.model import Diagnostic
    from tcinspect.diagnostic.types import DiagnosticProvider

logger: TCInspectLogger = get_logger(__name__)

# Severities absent from this table produce no SEVERITY attribute.
SEVERITY_ATTRIBUTE: Final[Mapping[Severity, str]] = MappingProxyType(
    {
        Severity.ERROR: "ERROR",
        Severity.WARNING: "WARNING",
        Severity.INFORMATION: "INFO",
        Severity.DEBUG: "INFO",
        Severity.STYLE: "INFO",
        Severity.PERFORMANCE: "WEAK WARNING",
        Severity.PORTABILITY: "WEAK WARNING",
    }
)


def normalize_report_path(path: str, base_paths: Iterable[str]) -> str:
    """Return the ``file`` attribute value for a diagnostic path.

    An empty path becomes the internal marker. Otherwise separators are
    normalized, absolute paths are made relative to the first matching base
    directory, and ``./`` is prefixed so that TeamCity never renders an empty
    directory label for top-level files.
    """
    if not path:
        return INTERNAL_FILE_MARKER
    normalized: str = from_native_separators(path)
    if is_absolute(normalized):
        normalized = get_relative_path(normalized, base_paths)
    return "./" + normalized


class TeamCityReporter:
    """Reporter emitting TeamCity service messages to a text stream.

    Args:
        settings (Settings): Report settings (verbose text, base paths).
        stream (TextIO): Destination of the service message lines.

    Attributes:
        settings (Settings): Report settings.
        stream (TextIO): Output stream.
        last_progress_subject (str | None): Subject of the last emitted progress message.
        last_progress_stage (str | None): Stage of the last emitted progress message.
        seen_diagnostics (set[str]): Canonical serializations of emitted diagnostics.
        emitted (int): Number of ``inspection`` lines written.
        suppressed (int): Number of duplicate diagnostics dropped.
    """

    def __init__(self, settings: Settings, stream: TextIO) -> None:
        self.settings = settings
        self.stream = stream
        self.last_progress_subject: str | None = None
        self.last_progress_stage: str | None = None
        self.seen_diagnostics: set[str] = set()
        self.emitted: int = 0
        self.suppressed: int = 0

    @classmethod
    def to_stdout(cls, settings: Settings) -> TeamCityReporter:
        """Create a reporter writing to the process standard output."""
        return cls(settings, sys.stdout)

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def report_plain_message(self, text: str) -> None:
        """Emit a ``message`` service message carrying ``text``."""
        self._write(format_message(MessageName.MESSAGE, {AttributeKey.TEXT: text}))

    def report_progress(self, subject: str, stage: str, value: int = 0) -> None:
        """Emit a ``progressMessage`` when a new subject or stage is reached.

        Args:
            subject (str): Item being processed (typically a file path).
            stage (str): Processing phase.
            value (int): Progress amount; accepted for contract compatibility and
                not rendered.
        """
        if subject == self.last_progress_subject and stage == self.last_progress_stage:
            logger.trace("Suppressed repeated progress %r/%r", subject, stage)
            return
        self.last_progress_subject = subject
        self.last_progress_stage = stage
        self._write(
            format_message(
                MessageName.PROGRESS_MESSAGE, f"inspecting '{subject}' stage: {stage}"
            )
        )

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Emit an ``inspection`` service message unless already reported."""
        key: str = diagnostic.serialize()
        if key in self.seen_diagnostics:
            self.suppressed += 1
            logger.trace("Suppressed duplicate diagnostic %s", diagnostic.kind)
            return
        self.seen_diagnostics.add(key)
        self._write(format_message(MessageName.INSPECTION, self.inspection_attributes(diagnostic)))
        self.emitted += 1

    def inspection_attributes(self, diagnostic: Diagnostic) -> dict[str, str]:
        """Return the attributes of the ``inspection`` message for ``diagnostic``."""
        values: dict[str, str] = {
            AttributeKey.TYPE_ID: diagnostic.kind,
            AttributeKey.MESSAGE: (
                diagnostic.verbose if self.settings.verbose else diagnostic.short
            ),
        }

        frame = diagnostic.primary_frame
        if frame is None:
            file: str = diagnostic.file0
        else:
            file = frame.file
            values[AttributeKey.LINE] = str(frame.line)
            values[AttributeKey.COLUMN] = str(frame.column)
        values[AttributeKey.FILE] = normalize_report_path(file, self.settings.base_paths)

        if diagnostic.cwe:
            values[AttributeKey.CWE] = str(diagnostic.cwe)
        if diagnostic.inconclusive:
            values[AttributeKey.INCONCLUSIVE] = "true"

        severity: str | None = SEVERITY_ATTRIBUTE.get(diagnostic.severity)
        if severity is not None:
            values[AttributeKey.SEVERITY] = severity
        return values

    def report_inspection_types(self, providers: Iterable[DiagnosticProvider]) -> int:
        """Emit one ``inspectionType`` message per diagnostic kind of ``providers``.

        Uses this reporter's stream and settings but leaves its duplicate and
        progress state untouched.

        Returns:
            int: Number of ``inspectionType`` lines written.
        """
        return emit_inspection_types(providers, settings=self.settings, stream=self.stream)
