# topmark:header:start
#
#   project      : TCInspect
#   file         : __init__.py
#   file_relpath : src/tcinspect/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, dependency-free building blocks shared across TCInspect."""
