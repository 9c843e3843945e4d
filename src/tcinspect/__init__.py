# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TCInspect package.

TCInspect turns static analysis results into TeamCity service messages. It
escapes and formats ``##teamcity[...]`` lines, suppresses duplicate findings and
repeated progress events, and announces the catalog of inspection types. It
exposes both a CLI (reading NDJSON results) and a small typed API.
"""

from __future__ import annotations
