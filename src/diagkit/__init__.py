# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagKit package.

DiagKit is the diagnostic aggregation and presentation core of a multi-phase
source-processing pipeline. Upstream phases build immutable `Issue` records,
a thread-safe `Collector` aggregates them into a deterministically ordered
`Result`, and a `Renderer` turns that result into human-readable text, a
stable JSON wire format, or LSP-style editor diagnostics.
"""

from __future__ import annotations
