# topmark:header:start
#
#   project      : TCInspect
#   file         : enum_mixins.py
#   file_relpath : src/tcinspect/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for TCInspect (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: a ``str`` Enum whose ``.value`` is a stable machine key,
      with parse aliases attached to each member.

Example:
    ```python
    from tcinspect.core.enum_mixins import KeyedStrEnum

    class Mode(KeyedStrEnum):
        A = ("alpha",)
        B = ("beta", ("b",))

    assert Mode.parse("B") is Mode.B
    assert Mode.A.key == "alpha"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`) and
        any configured aliases. Matching is case-insensitive and normalizes
        '-' and ' ' to '_'.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None
