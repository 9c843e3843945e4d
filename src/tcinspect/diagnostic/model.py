# topmark:header:start
#
#   project      : TCInspect
#   file         : model.py
#   file_relpath : src/tcinspect/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for TCInspect.

This module defines the data handed over by the analysis pipeline:

Sections:
    * Severity: the analyzer's severity classification.
    * FileLocation: one frame of a diagnostic's location list.
    * Diagnostic: immutable finding with identity, messages and locations, plus
      its canonical serialization used for duplicate suppression.
    * DiagnosticDescription: location-free description of a diagnostic kind, as
      produced when providers enumerate what they can report.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tcinspect.core.enum_mixins import KeyedStrEnum


class Severity(KeyedStrEnum):
    """Severity of a diagnostic as classified by the analyzer.

    The ``value`` is the analyzer's lowercase severity name.
    """

    NONE = ("none",)
    ERROR = ("error",)
    WARNING = ("warning",)
    STYLE = ("style",)
    PERFORMANCE = ("performance",)
    PORTABILITY = ("portability",)
    INFORMATION = ("information", ("info",))
    DEBUG = ("debug",)

    @property
    def display_name(self) -> str:
        """Return the name used in report categories (empty for `NONE`)."""
        return "" if self is Severity.NONE else self.key


@dataclass(frozen=True, slots=True)
class FileLocation:
    """A single location frame (1-based line and column; 0 means unknown)."""

    file: str
    line: int = 0
    column: int = 0


def _field(value: str) -> str:
    """Length-prefix a single serialized field."""
    return f"{len(value)} {value}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One analysis finding.

    Attributes:
        kind (str): Stable diagnostic identifier (e.g. ``"nullPointer"``).
        short (str): One-line human message.
        verbose (str): Detailed human message; defaults to ``short`` when empty.
        severity (Severity): Analyzer severity.
        inconclusive (bool): The analyzer is not certain about the finding.
        cwe (int): Weakness classifier code; ``0`` means none.
        frames (tuple[FileLocation, ...]): Location frames; the first one is the
            primary location.
        file0 (str): Fallback file for diagnostics without frames (e.g. the
            translation unit being analyzed, or empty for tool-level findings).
    """

    kind: str
    short: str
    verbose: str = ""
    severity: Severity = Severity.NONE
    inconclusive: bool = False
    cwe: int = 0
    frames: tuple[FileLocation, ...] = field(default=())
    file0: str = ""

    def __post_init__(self) -> None:
        if not self.verbose:
            object.__setattr__(self, "verbose", self.short)
        # Accept any sequence of frames but store an immutable tuple.
        object.__setattr__(self, "frames", tuple(self.frames))

    @property
    def primary_frame(self) -> FileLocation | None:
        """Return the primary location, or None when there are no frames."""
        return self.frames[0] if self.frames else None

    def serialize(self) -> str:
        """Return the canonical serialization of this diagnostic.

        The result is a deterministic, content-complete encoding used only for
        equality checks (duplicate suppression). Each field is written as
        ``<len> <value>`` so that no field content can be confused with a field
        boundary. The frame list is preceded by its count and each frame is
        encoded as ``line<TAB>column<TAB>file``.
        """
        parts: list[str] = [
            _field(self.kind),
            _field(self.severity.key),
            _field(str(self.cwe)),
            _field("inconclusive" if self.inconclusive else ""),
            _field(self.short),
            _field(self.verbose),
            _field(self.file0),
            f"{len(self.frames)} ",
        ]
        parts.extend(_field(f"{f.line}\t{f.column}\t{f.file}") for f in self.frames)
        return "".join(parts)

    def describe(self) -> DiagnosticDescription:
        """Return the location-free description of this diagnostic's kind."""
        return DiagnosticDescription(
            kind=self.kind,
            severity=self.severity,
            short=self.short,
            verbose=self.verbose,
            cwe=self.cwe,
        )


@dataclass(frozen=True, slots=True)
class DiagnosticDescription:
    """Description of a diagnostic kind a provider is able to report."""

    kind: str
    severity: Severity
    short: str
    verbose: str = ""
    cwe: int = 0

    def __post_init__(self) -> None:
        if not self.verbose:
            object.__setattr__(self, "verbose", self.short)
