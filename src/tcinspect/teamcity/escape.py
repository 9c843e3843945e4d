# topmark:header:start
#
#   project      : TCInspect
#   file         : escape.py
#   file_relpath : src/tcinspect/teamcity/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Escaping of TeamCity service message values.

Every occurrence of a reserved character is prefixed with the escape marker
``|``; newline and carriage return are additionally replaced by the letters
``n`` and ``r``:

    - ``'`` becomes ``|'``
    - ``\n`` becomes ``|n`` and ``\r`` becomes ``|r``
    - ``[`` and ``]`` become ``|[`` and ``|]``
    - ``|`` becomes ``||``

Escaping is not idempotent: each value must be escaped exactly once.

See https://www.jetbrains.com/help/teamcity/service-messages.html#Escaped+Values
"""

from __future__ import annotations

from typing import Final

ESCAPE_MARKER: Final[str] = "|"

RESERVED_CHARACTERS: Final[str] = "'\n\r[]|"

_ESCAPE_TABLE: Final[dict[int, str]] = str.maketrans(
    {
        "'": "|'",
        "\n": "|n",
        "\r": "|r",
        "[": "|[",
        "]": "|]",
        "|": "||",
    }
)


def escape(value: str) -> str:
    """Escape ``value`` for embedding in a service message attribute.

    Args:
        value (str): Raw attribute value.

    Returns:
        str: The escaped value (empty for empty input).
    """
    return value.translate(_ESCAPE_TABLE)
