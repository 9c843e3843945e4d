# topmark:header:start
#
#   project      : TCInspect
#   file         : errors.py
#   file_relpath : src/tcinspect/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TCInspect library layers.

The service-message core itself never raises: every diagnostic maps to a valid
line. These exceptions cover the surrounding layers (configuration loading and
machine input decoding). The CLI translates them into Click errors with
dedicated exit codes (see [`tcinspect.cli.errors`][tcinspect.cli.errors]).
"""

from __future__ import annotations


class TCInspectError(Exception):
    """Base class for all TCInspect library errors."""


class ConfigError(TCInspectError, ValueError):
    """Configuration source is missing, unreadable or malformed."""


class MachineInputError(TCInspectError, ValueError):
    """A machine input record (NDJSON line or catalog entry) could not be decoded.

    Attributes:
        line_number (int | None): 1-based input line of the offending record, if known.
    """

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
