# topmark:header:start
#
#   project      : TCInspect
#   file         : serializers.py
#   file_relpath : src/tcinspect/diagnostic/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NDJSON encoding and decoding of reporter input records.

Decoding is strict about shape (missing or wrongly typed fields raise
[`MachineInputError`][tcinspect.errors.MachineInputError]) and lenient about
values: an unknown severity name decodes to `Severity.NONE` with a warning, so
the diagnostic is still reported, only without a ``SEVERITY`` attribute.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar, Union, cast

from tcinspect.config.logging import get_logger
from tcinspect.diagnostic.machine.schemas import (
    DiagnosticPayload,
    LocationPayload,
    MachineKey,
    MachineKind,
    PlainMessage,
    ProgressEvent,
)
from tcinspect.diagnostic.model import Diagnostic, FileLocation, Severity
from tcinspect.errors import MachineInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from tcinspect.config.logging import TCInspectLogger
    from tcinspect.diagnostic.types import Reporter

InputRecord = Union[PlainMessage, ProgressEvent, Diagnostic]

_T = TypeVar("_T")

logger: TCInspectLogger = get_logger(__name__)


def _require(data: Mapping[str, Any], key: str, expected: type[_T]) -> _T:
    value: Any = data.get(key)
    if value is None:
        raise MachineInputError(f"missing required key '{key}'")
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise MachineInputError(f"'{key}' must be of type {expected.__name__}")
    return cast("_T", value)


def _optional(data: Mapping[str, Any], key: str, expected: type[_T], default: _T) -> _T:
    if data.get(key) is None:
        return default
    return _require(data, key, expected)


def location_from_dict(data: Mapping[str, Any]) -> FileLocation:
    """Decode one location frame."""
    return FileLocation(
        file=_require(data, MachineKey.FILE, str),
        line=_optional(data, MachineKey.LINE, int, 0),
        column=_optional(data, MachineKey.COLUMN, int, 0),
    )


def diagnostic_from_dict(data: Mapping[str, Any]) -> Diagnostic:
    """Decode a ``diagnostic`` record into a `Diagnostic`.

    Args:
        data (Mapping[str, Any]): The decoded JSON object.

    Returns:
        Diagnostic: The diagnostic.

    Raises:
        MachineInputError: If a required key is missing or a field has the wrong type.
    """
    raw_severity: str = _optional(data, MachineKey.SEVERITY, str, Severity.NONE.key)
    severity: Severity | None = Severity.parse(raw_severity)
    if severity is None:
        logger.warning("Unknown severity %r, reporting without severity", raw_severity)
        severity = Severity.NONE

    raw_locations: list[Any] = _optional(data, MachineKey.LOCATIONS, list, [])
    frames: list[FileLocation] = []
    for raw in raw_locations:
        if not isinstance(raw, dict):
            raise MachineInputError(f"'{MachineKey.LOCATIONS}' entries must be objects")
        frames.append(location_from_dict(cast("dict[str, Any]", raw)))

    return Diagnostic(
        kind=_require(data, MachineKey.ID, str),
        short=_require(data, MachineKey.SHORT, str),
        verbose=_optional(data, MachineKey.VERBOSE, str, ""),
        severity=severity,
        inconclusive=_optional(data, MachineKey.INCONCLUSIVE, bool, False),
        cwe=_optional(data, MachineKey.CWE, int, 0),
        frames=tuple(frames),
        file0=_optional(data, MachineKey.FILE0, str, ""),
    )


def diagnostic_to_dict(diagnostic: Diagnostic) -> DiagnosticPayload:
    """Encode a `Diagnostic` as a ``diagnostic`` record."""
    locations: list[LocationPayload] = [
        {MachineKey.FILE: f.file, MachineKey.LINE: f.line, MachineKey.COLUMN: f.column}
        for f in diagnostic.frames
    ]
    return {
        "kind": MachineKind.DIAGNOSTIC,
        "id": diagnostic.kind,
        "severity": diagnostic.severity.key,
        "short": diagnostic.short,
        "verbose": diagnostic.verbose,
        "inconclusive": diagnostic.inconclusive,
        "cwe": diagnostic.cwe,
        "file0": diagnostic.file0,
        "locations": locations,
    }


def record_from_dict(data: Mapping[str, Any]) -> InputRecord:
    """Decode any input record according to its ``kind``.

    Raises:
        MachineInputError: If the kind is unknown or the record is malformed.
    """
    kind: str = _require(data, MachineKey.KIND, str)
    if kind == MachineKind.DIAGNOSTIC:
        return diagnostic_from_dict(data)
    if kind == MachineKind.PROGRESS:
        return ProgressEvent(
            subject=_require(data, MachineKey.SUBJECT, str),
            stage=_require(data, MachineKey.STAGE, str),
            value=_optional(data, MachineKey.VALUE, int, 0),
        )
    if kind == MachineKind.MESSAGE:
        return PlainMessage(text=_require(data, MachineKey.TEXT, str))
    raise MachineInputError(
        f"unknown record kind '{kind}' - valid choices: {', '.join(sorted(MachineKind.ALL))}"
    )


def iter_input_records(lines: Iterable[str]) -> Iterator[InputRecord]:
    """Decode NDJSON lines into input records.

    Blank lines are skipped.

    Args:
        lines (Iterable[str]): NDJSON text lines (e.g. an open text file).

    Yields:
        InputRecord: One decoded record per non-blank line.

    Raises:
        MachineInputError: For invalid JSON or malformed records; ``line_number``
            is set to the 1-based input line.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            data: Any = json.loads(line)
        except json.JSONDecodeError as e:
            raise MachineInputError(f"invalid JSON: {e.msg}", line_number=line_number) from e
        if not isinstance(data, dict):
            raise MachineInputError("record must be a JSON object", line_number=line_number)
        try:
            record: InputRecord = record_from_dict(cast("dict[str, Any]", data))
        except MachineInputError as e:
            raise MachineInputError(str(e), line_number=line_number) from e
        yield record


def dispatch_record(record: InputRecord, reporter: Reporter) -> None:
    """Forward a decoded record to the matching reporter operation."""
    if isinstance(record, Diagnostic):
        reporter.report_diagnostic(record)
    elif isinstance(record, ProgressEvent):
        reporter.report_progress(record.subject, record.stage, record.value)
    else:
        reporter.report_plain_message(record.text)
