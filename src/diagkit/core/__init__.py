# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, UI-agnostic helpers used across DiagKit."""

from __future__ import annotations
