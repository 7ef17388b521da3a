"""
Configuration: environment settings and shared constants.

Settings are read through the module (settings.VERBOSE) so that changes made
after import are seen.
"""

from formfields.config import settings
from formfields.config.constants import (
    ADDRESS_MIN_LENGTH,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
)

__all__ = [
    # Settings
    "settings",
    # Constants
    "ADDRESS_MIN_LENGTH",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
]
