# topmark:header:start
#
#   project      : TCInspect
#   file         : __main__.py
#   file_relpath : src/tcinspect/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TCInspect via ``python -m tcinspect``.

It delegates directly to :func:`tcinspect.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how TCInspect is launched.

Examples:
    Convert analyzer results to service messages::

        python -m tcinspect emit results.ndjson
"""

from __future__ import annotations

from tcinspect.cli.main import cli

if __name__ == "__main__":
    cli()
