# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of issues and results.

Submodules:
    - `diagkit.rendering.renderer`: the `Renderer` facade (text, JSON, LSP).
    - `diagkit.rendering.text`: text block building blocks.
    - `diagkit.rendering.lsp`: LSP diagnostic shapes and UTF-16 conversion.
    - `diagkit.rendering.color`: severity styles and color-mode resolution.
"""
