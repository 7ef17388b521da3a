"""
Field Validators

Provides validation for common form field types.
Custom validators can be added by consumers via register_validator().
"""

import logging
from typing import List, Optional

from formfields.validators.base import BaseValidator
from formfields.validators.address import AddressValidator
from formfields.validators.email import EmailValidator
from formfields.validators.name import NameValidator
from formfields.validators.phone import PhoneValidator
from formfields.validators.postcode import PostcodeValidator
from formfields.validators.url import UrlValidator
from formfields.validators.ip_address import IpAddressValidator

logger = logging.getLogger(__name__)

# Registry of built-in validators
_VALIDATORS = {
    "address": AddressValidator(),
    "email": EmailValidator(),
    "name": NameValidator(),
    "phone_number": PhoneValidator(),
    "postcode": PostcodeValidator(),
    "url": UrlValidator(),
    "ip_address": IpAddressValidator(),
}


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator, replacing any existing one of that name."""
    if not isinstance(validator, BaseValidator):
        raise TypeError(f"Expected a BaseValidator, got {type(validator).__name__}")

    if name in _VALIDATORS:
        logger.warning(f"REGISTRY | Replacing validator '{name}' with {validator!r}")
    _VALIDATORS[name] = validator


def available_validators() -> List[str]:
    """Names of all registered validators, sorted."""
    return sorted(_VALIDATORS)


__all__ = [
    "BaseValidator",
    "AddressValidator",
    "EmailValidator",
    "NameValidator",
    "PhoneValidator",
    "PostcodeValidator",
    "UrlValidator",
    "IpAddressValidator",
    "get_validator",
    "register_validator",
    "available_validators",
]
