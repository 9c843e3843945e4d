# topmark:header:start
#
#   project      : TCInspect
#   file         : paths.py
#   file_relpath : src/tcinspect/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for path normalization.

These utilities operate on path *strings* as reported by the analysis engine.
They perform **no I/O** and never consult the host filesystem, so a report
produced on one platform renders identically on another.

Key behaviors:
    - ``from_native_separators(path)``: turn every backslash into ``/``.
    - ``is_absolute(path)``: POSIX root, drive letter or UNC prefix.
    - ``get_relative_path(path, base_paths)``: strip the first matching base
      directory, or return the path unchanged.
    - ``abs_path_from(base, raw)``: anchor config-declared directories.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from tcinspect.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike

    from tcinspect.config.logging import TCInspectLogger

logger: TCInspectLogger = get_logger(__name__)

_DRIVE_PATH_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:/")


def from_native_separators(path: str) -> str:
    """Return ``path`` with all backslashes replaced by forward slashes."""
    return path.replace("\\", "/")


def is_absolute(path: str) -> bool:
    """Return True if ``path`` is absolute on any supported platform.

    Recognizes POSIX roots (``/src``), UNC shares (``//host/share``) and drive
    paths (``C:/src``). Backslashes are normalized first.
    """
    normalized: str = from_native_separators(path)
    return normalized.startswith("/") or bool(_DRIVE_PATH_RE.match(normalized))


def get_relative_path(path: str, base_paths: Iterable[str]) -> str:
    """Rewrite ``path`` relative to the first base directory containing it.

    Bases are tried in order. Empty bases and bases equal to ``path`` itself are
    skipped. A base matches when ``path`` starts with it and the next character is
    a separator (a trailing separator on the base is accepted).

    Args:
        path (str): Path with forward-slash separators.
        base_paths (Iterable[str]): Candidate base directories.

    Returns:
        str: The remainder after the matching base, or ``path`` unchanged when no
            base matches.
    """
    for raw_base in base_paths:
        base: str = from_native_separators(raw_base)
        if not base or base == path:
            continue
        prefix: str = base if base.endswith("/") else base + "/"
        if path.startswith(prefix):
            rest: str = path[len(prefix) :]
            logger.trace("Relativized %r against %r -> %r", path, base, rest)
            return rest
    return path


def abs_path_from(base: Path, raw: str | PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative.

    The result is normalized lexically (``..`` and ``.`` folded); symlinks are
    kept as written so that it still prefixes paths reported through them.
    """
    return Path(os.path.abspath(os.path.join(base, raw)))
