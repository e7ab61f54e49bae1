# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for DiagKit.

Submodules:
    - `diagkit.config.logging`: logger class with a TRACE level and setup helpers.
    - `diagkit.config.model`: frozen/mutable renderer and collector configuration.
    - `diagkit.config.io`: tomlkit-based loading and typed table getters.

This package deliberately re-exports nothing, so that importing
`diagkit.config.logging` from core modules never pulls in the config model.
"""
