# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TCInspect.

The entry point is [`tcinspect.cli.main.cli`][tcinspect.cli.main.cli]; each
subcommand lives in its own module under ``tcinspect.cli.commands``.
"""
