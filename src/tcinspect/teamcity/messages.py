# topmark:header:start
#
#   project      : TCInspect
#   file         : messages.py
#   file_relpath : src/tcinspect/teamcity/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting of TeamCity service messages.

Two message shapes exist:

- single value: ``##teamcity[<name> '<value>']``
- attributes: ``##teamcity[<name> key1='<value1>' key2='<value2>' ...]``

Attributes are written in lexicographic key order so that the same mapping
always produces the same line. Values are escaped with
[`escape`][tcinspect.teamcity.escape.escape]; names and keys are emitted verbatim.
No trailing newline is appended.

See https://www.jetbrains.com/help/teamcity/service-messages.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from tcinspect.constants import SERVICE_MESSAGE_PREFIX, SERVICE_MESSAGE_SUFFIX
from tcinspect.teamcity.escape import escape


class MessageName:
    """Service message names emitted by TCInspect."""

    MESSAGE: Final[str] = "message"
    PROGRESS_MESSAGE: Final[str] = "progressMessage"
    INSPECTION: Final[str] = "inspection"
    INSPECTION_TYPE: Final[str] = "inspectionType"


class AttributeKey:
    """Attribute keys used in `inspection` and `inspectionType` messages."""

    TEXT: Final[str] = "text"

    TYPE_ID: Final[str] = "typeId"
    MESSAGE: Final[str] = "message"
    FILE: Final[str] = "file"
    LINE: Final[str] = "line"
    COLUMN: Final[str] = "column"
    CWE: Final[str] = "cwe"
    INCONCLUSIVE: Final[str] = "inconclusive"
    SEVERITY: Final[str] = "SEVERITY"

    ID: Final[str] = "id"
    NAME: Final[str] = "name"
    DESCRIPTION: Final[str] = "description"
    CATEGORY: Final[str] = "category"


def format_message(name: str, payload: str | Mapping[str, str]) -> str:
    """Format a service message.

    Args:
        name (str): The message name (e.g. ``"inspection"``).
        payload (str | Mapping[str, str]): Either a single value, or a mapping of
            attribute names to values.

    Returns:
        str: The formatted service message line, without line terminator.
    """
    if isinstance(payload, str):
        return f"{SERVICE_MESSAGE_PREFIX}{name} '{escape(payload)}'{SERVICE_MESSAGE_SUFFIX}"
    attributes: str = "".join(
        f" {key}='{escape(value)}'" for key, value in sorted(payload.items())
    )
    return f"{SERVICE_MESSAGE_PREFIX}{name}{attributes}{SERVICE_MESSAGE_SUFFIX}"
