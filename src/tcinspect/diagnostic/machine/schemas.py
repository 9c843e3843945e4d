# topmark:header:start
#
#   project      : TCInspect
#   file         : schemas.py
#   file_relpath : src/tcinspect/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keys, kinds and typed shapes of machine-readable reporter input.

The analysis pipeline hands its results to TCInspect as NDJSON: one JSON object
per line, discriminated by its ``kind``:

- ``message``: ``{"kind": "message", "text": "..."}``
- ``progress``: ``{"kind": "progress", "subject": "a.cpp", "stage": "parse", "value": 0}``
- ``diagnostic``: ``{"kind": "diagnostic", "id": "nullPointer", "severity": "error",
  "short": "...", "verbose": "...", "inconclusive": false, "cwe": 476, "file0": "",
  "locations": [{"file": "src/a.cpp", "line": 3, "column": 7}]}``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypedDict


class MachineKey:
    """Canonical keys of input records."""

    KIND: Final[str] = "kind"

    # message
    TEXT: Final[str] = "text"

    # progress
    SUBJECT: Final[str] = "subject"
    STAGE: Final[str] = "stage"
    VALUE: Final[str] = "value"

    # diagnostic
    ID: Final[str] = "id"
    SEVERITY: Final[str] = "severity"
    SHORT: Final[str] = "short"
    VERBOSE: Final[str] = "verbose"
    INCONCLUSIVE: Final[str] = "inconclusive"
    CWE: Final[str] = "cwe"
    FILE0: Final[str] = "file0"
    LOCATIONS: Final[str] = "locations"

    # location
    FILE: Final[str] = "file"
    LINE: Final[str] = "line"
    COLUMN: Final[str] = "column"


class MachineKind:
    """Canonical ``kind`` values of input records."""

    MESSAGE: Final[str] = "message"
    PROGRESS: Final[str] = "progress"
    DIAGNOSTIC: Final[str] = "diagnostic"

    ALL: Final[frozenset[str]] = frozenset({MESSAGE, PROGRESS, DIAGNOSTIC})


class LocationPayload(TypedDict, total=False):
    """JSON shape of one location frame (``file`` is required)."""

    file: str
    line: int
    column: int


class DiagnosticPayload(TypedDict, total=False):
    """JSON shape of a ``diagnostic`` record (``kind``, ``id`` and ``short`` are required)."""

    kind: str
    id: str
    severity: str
    short: str
    verbose: str
    inconclusive: bool
    cwe: int
    file0: str
    locations: list[LocationPayload]


@dataclass(frozen=True, slots=True)
class PlainMessage:
    """Decoded ``message`` record."""

    text: str


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """Decoded ``progress`` record."""

    subject: str
    stage: str
    value: int = 0
