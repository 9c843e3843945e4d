# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/teamcity/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TeamCity service message output.

Layering (leaves first):
    - [`escape`][tcinspect.teamcity.escape]: value escaping.
    - [`messages`][tcinspect.teamcity.messages]: service message formatting.
    - [`catalog`][tcinspect.teamcity.catalog]: inspection type announcements.
    - [`sink`][tcinspect.teamcity.sink]: the stateful reporter.
"""

from __future__ import annotations

from tcinspect.teamcity.catalog import InspectionTypeLogger, emit_inspection_types
from tcinspect.teamcity.escape import escape
from tcinspect.teamcity.messages import AttributeKey, MessageName, format_message
from tcinspect.teamcity.sink import SEVERITY_ATTRIBUTE, TeamCityReporter, normalize_report_path

__all__ = [
    "SEVERITY_ATTRIBUTE",
    "AttributeKey",
    "InspectionTypeLogger",
    "MessageName",
    "TeamCityReporter",
    "emit_inspection_types",
    "escape",
    "format_message",
    "normalize_report_path",
]
