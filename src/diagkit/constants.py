# topmark:header:start
#
#   project      : DiagKit
#   file         : constants.py
#   file_relpath : src/diagkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagKit Constants."""

from __future__ import annotations

from typing import Final

# Environment variable consulted by `diagkit.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "DIAGKIT_LOG_LEVEL"

# A collector limit of zero means "unlimited"
NO_LIMIT: Final[int] = 0

# Renderer defaults
DEFAULT_MAX_LINE_COLUMNS: Final[int] = 120
DEFAULT_TRUNCATION_INDICATOR: Final[str] = "..."
DEFAULT_LSP_SOURCE: Final[str] = "diagkit"

# Placeholder texts
NO_LOCATION_TEXT: Final[str] = "<no location>"
UNKNOWN_LOCATION_TEXT: Final[str] = "<unknown>"
