# topmark:header:start
#
#   project      : TCInspect
#   file         : constants.py
#   file_relpath : src/tcinspect/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TCInspect Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TCINSPECT_VERSION: str = get_version("tcinspect")

# Config discovery
TCINSPECT_TOML_NAME: Final[str] = "tcinspect.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# TeamCity service message framing
SERVICE_MESSAGE_PREFIX: Final[str] = "##teamcity["
SERVICE_MESSAGE_SUFFIX: Final[str] = "]"

# File attribute used for tool-level diagnostics that carry no source location
INTERNAL_FILE_MARKER: Final[str] = "<cppcheck>"

# Prefix of the `category` attribute of `inspectionType` messages
INSPECTION_CATEGORY_PREFIX: Final[str] = "cppcheck "
