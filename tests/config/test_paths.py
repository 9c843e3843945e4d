# topmark:header:start
#
#   project      : TCInspect
#   file         : test_paths.py
#   file_relpath : tests/config/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for path helpers used when reporting diagnostic locations."""

from __future__ import annotations

from pathlib import Path

from tests.conftest import parametrize
from tcinspect.config.paths import (
    abs_path_from,
    from_native_separators,
    get_relative_path,
    is_absolute,
)


def test_from_native_separators() -> None:
    """All backslashes become forward slashes."""
    assert from_native_separators("C:\\a\\b/c") == "C:/a/b/c"
    assert from_native_separators("a/b") == "a/b"


@parametrize(
    "path, expected",
    [
        ("/usr/src/a.c", True),
        ("//server/share/a.c", True),
        ("C:/work/a.c", True),
        ("c:\\work\\a.c", True),
        ("\\\\server\\share", True),
        ("src/a.c", False),
        ("./a.c", False),
        ("C:a.c", False),
        ("", False),
    ],
)
def test_is_absolute(path: str, expected: bool) -> None:
    """POSIX roots, UNC shares and drive paths are absolute."""
    assert is_absolute(path) is expected


@parametrize(
    "path, bases, expected",
    [
        ("/p/src/a.c", ["/p"], "src/a.c"),
        ("/p/src/a.c", ["/p/"], "src/a.c"),
        ("/p/src/a.c", ["", "/p"], "src/a.c"),
        ("/p/src/a.c", ["/p/src/a.c", "/p"], "src/a.c"),
        ("/p/src/a.c", ["/p/src", "/p"], "a.c"),
        ("/p/src/a.c", ["/p", "/p/src"], "src/a.c"),
        ("/pp/a.c", ["/p"], "/pp/a.c"),
        ("/p/a.c", [], "/p/a.c"),
        ("C:/w/a.c", ["C:\\w"], "a.c"),
    ],
)
def test_get_relative_path(path: str, bases: list[str], expected: str) -> None:
    """The first base that is a directory prefix of the path is stripped."""
    assert get_relative_path(path, bases) == expected


def test_abs_path_from(tmp_path: Path) -> None:
    """Relative paths are anchored to the base; absolute ones are kept."""
    assert abs_path_from(tmp_path, "sub") == tmp_path / "sub"
    assert abs_path_from(tmp_path, tmp_path / "x") == tmp_path / "x"
    assert abs_path_from(tmp_path / "a", "../b/./c") == tmp_path / "b" / "c"


def test_abs_path_from_keeps_symlinked_prefix(tmp_path: Path) -> None:
    """Anchoring under a symlinked directory does not resolve the link."""
    real: Path = tmp_path / "real"
    real.mkdir()
    link: Path = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    anchored: Path = abs_path_from(link, "src")

    assert anchored == link / "src"
    assert get_relative_path("/".join((anchored.as_posix(), "a.c")), [anchored.as_posix()]) == "a.c"
