"""
Package settings loaded from environment variables.

All settings have sensible defaults so validation works out of the box.
"""

import os

# =============================================================================
# Logging
# =============================================================================
# Empty leaves the level of the "formfields" logger to the host application
LOG_LEVEL = os.getenv("FORMFIELDS_LOG_LEVEL", "")
VERBOSE = os.getenv("FORMFIELDS_VERBOSE", "false").lower() in ("true", "1", "yes")
