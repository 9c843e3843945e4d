# topmark:header:start
#
#   project      : TCInspect
#   file         : test_machine_records.py
#   file_relpath : tests/diagnostic/test_machine_records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for NDJSON input records: decoding, error reporting and dispatch."""

from __future__ import annotations

import json
from typing import Any

import pytest

from tests.conftest import make_reporter, output_lines, parametrize
from tcinspect.diagnostic.machine import (
    PlainMessage,
    ProgressEvent,
    diagnostic_from_dict,
    diagnostic_to_dict,
    dispatch_record,
    iter_input_records,
    record_from_dict,
)
from tcinspect.diagnostic.model import Diagnostic, FileLocation, Severity
from tcinspect.errors import MachineInputError

DIAGNOSTIC_RECORD: dict[str, Any] = {
    "kind": "diagnostic",
    "id": "nullPointer",
    "severity": "error",
    "short": "Null pointer dereference",
    "verbose": "Possible null pointer dereference: p",
    "inconclusive": False,
    "cwe": 476,
    "locations": [{"file": "src/a.cpp", "line": 3, "column": 7}],
}


def test_decode_diagnostic() -> None:
    """A full diagnostic record decodes into the matching model object."""
    d: Diagnostic = diagnostic_from_dict(DIAGNOSTIC_RECORD)
    assert d.kind == "nullPointer"
    assert d.severity is Severity.ERROR
    assert d.cwe == 476
    assert d.frames == (FileLocation("src/a.cpp", 3, 7),)
    assert d.file0 == ""


def test_decode_minimal_diagnostic() -> None:
    """Only id and short are required."""
    d: Diagnostic = diagnostic_from_dict({"id": "k", "short": "s"})
    assert d == Diagnostic(kind="k", short="s")


def test_decode_location_defaults() -> None:
    """Line and column default to 0."""
    d: Diagnostic = diagnostic_from_dict({"id": "k", "short": "s", "locations": [{"file": "a"}]})
    assert d.frames == (FileLocation("a", 0, 0),)


def test_unknown_severity_is_reported_without_severity(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown severities degrade to NONE with a warning."""
    d: Diagnostic = diagnostic_from_dict({"id": "k", "short": "s", "severity": "fatal"})
    assert d.severity is Severity.NONE
    assert "fatal" in caplog.text


@parametrize(
    "record, message",
    [
        ({"short": "s"}, "'id'"),
        ({"id": "k"}, "'short'"),
        ({"id": 3, "short": "s"}, "'id' must be of type str"),
        ({"id": "k", "short": "s", "cwe": "476"}, "'cwe' must be of type int"),
        ({"id": "k", "short": "s", "cwe": True}, "'cwe' must be of type int"),
        ({"id": "k", "short": "s", "inconclusive": "yes"}, "'inconclusive'"),
        ({"id": "k", "short": "s", "locations": ["a.c"]}, "entries must be objects"),
        ({"id": "k", "short": "s", "locations": [{"line": 1}]}, "'file'"),
    ],
)
def test_decode_diagnostic_errors(record: dict[str, Any], message: str) -> None:
    """Malformed diagnostics raise MachineInputError naming the problem."""
    with pytest.raises(MachineInputError) as exc_info:
        diagnostic_from_dict(record)
    assert message in str(exc_info.value)


def test_encode_diagnostic_is_accepted_by_decoder() -> None:
    """Encoded diagnostics use the input schema."""
    d = Diagnostic(
        kind="k",
        short="s",
        severity=Severity.PERFORMANCE,
        inconclusive=True,
        frames=(FileLocation("x.c", 4, 2),),
        file0="unit.c",
    )
    payload: dict[str, Any] = dict(diagnostic_to_dict(d))
    assert payload["kind"] == "diagnostic"
    assert payload["severity"] == "performance"
    assert record_from_dict(json.loads(json.dumps(payload))) == d


def test_record_kinds() -> None:
    """Messages and progress events decode to their record types."""
    assert record_from_dict({"kind": "message", "text": "hi"}) == PlainMessage("hi")
    assert record_from_dict({"kind": "progress", "subject": "a.c", "stage": "parse"}) == (
        ProgressEvent("a.c", "parse", 0)
    )


def test_unknown_record_kind() -> None:
    """Unknown kinds list the valid choices."""
    with pytest.raises(MachineInputError, match="diagnostic, message, progress"):
        record_from_dict({"kind": "result"})


def test_iter_records_skips_blank_lines() -> None:
    """Blank lines are ignored."""
    lines: list[str] = [
        json.dumps({"kind": "message", "text": "a"}) + "\n",
        "\n",
        "   \n",
        json.dumps({"kind": "message", "text": "b"}),
    ]
    assert list(iter_input_records(lines)) == [PlainMessage("a"), PlainMessage("b")]


@parametrize(
    "bad_line, message",
    [
        ("{not json", "invalid JSON"),
        ("[1, 2]", "must be a JSON object"),
        ('{"kind": "message"}', "'text'"),
    ],
)
def test_iter_records_reports_line_numbers(bad_line: str, message: str) -> None:
    """Errors carry the 1-based line number of the offending record."""
    lines: list[str] = ['{"kind": "message", "text": "ok"}', "", bad_line]
    records = iter_input_records(lines)
    assert next(records) == PlainMessage("ok")
    with pytest.raises(MachineInputError) as exc_info:
        next(records)
    assert exc_info.value.line_number == 3
    assert str(exc_info.value).startswith("line 3: ")
    assert message in str(exc_info.value)


def test_dispatch_routes_each_record_kind() -> None:
    """Each record type reaches the matching reporter operation."""
    reporter, buffer = make_reporter()
    for record in (
        PlainMessage("hello"),
        ProgressEvent("a.c", "parse", 3),
        diagnostic_from_dict(DIAGNOSTIC_RECORD),
    ):
        dispatch_record(record, reporter)
    lines: list[str] = output_lines(buffer)
    assert lines[0].startswith("##teamcity[message ")
    assert lines[1].startswith("##teamcity[progressMessage ")
    assert lines[2].startswith("##teamcity[inspection ")
