"""
Shared constants used across the validators.

Centralizes the length bounds that the field rules are built on.
"""

# Address must not be empty
ADDRESS_MIN_LENGTH = 1

# Display name length bounds (inclusive)
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 34
