# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (NDJSON) reporter input.

Layers:
    - [`schemas`][tcinspect.diagnostic.machine.schemas]: keys, kinds and typed shapes.
    - [`serializers`][tcinspect.diagnostic.machine.serializers]: decoding, encoding
      and dispatch to a reporter.
"""

from __future__ import annotations

from tcinspect.diagnostic.machine.schemas import MachineKey, MachineKind, PlainMessage, ProgressEvent
from tcinspect.diagnostic.machine.serializers import (
    InputRecord,
    diagnostic_from_dict,
    diagnostic_to_dict,
    dispatch_record,
    iter_input_records,
    record_from_dict,
)

__all__ = [
    "InputRecord",
    "MachineKey",
    "MachineKind",
    "PlainMessage",
    "ProgressEvent",
    "diagnostic_from_dict",
    "diagnostic_to_dict",
    "dispatch_record",
    "iter_input_records",
    "record_from_dict",
]
