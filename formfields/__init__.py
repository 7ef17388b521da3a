"""
formfields

Stateless validation predicates for common form fields: addresses, email
addresses, names, UK phone numbers, UK postcodes, URLs and IP addresses.
"""

import logging

from formfields.config.settings import LOG_LEVEL
from formfields.validate import (
    validate_address,
    validate_email,
    validate_name,
    validate_phone_number,
    validate_postcode,
    validate_url,
    validate_ip_address,
)
from formfields.validators import (
    BaseValidator,
    get_validator,
    register_validator,
    available_validators,
)


def _apply_log_level(logger: logging.Logger, level: str):
    """Set an explicitly configured level; otherwise leave the logger alone."""
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))


_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_apply_log_level(_logger, LOG_LEVEL)

__all__ = [
    "validate_address",
    "validate_email",
    "validate_name",
    "validate_phone_number",
    "validate_postcode",
    "validate_url",
    "validate_ip_address",
    "BaseValidator",
    "get_validator",
    "register_validator",
    "available_validators",
]
