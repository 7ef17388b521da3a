"""Address Validator"""

from formfields.config.constants import ADDRESS_MIN_LENGTH
from formfields.validators.base import BaseValidator


class AddressValidator(BaseValidator):
    """
    Validates postal addresses.

    Currently only checks that something was entered. Whitespace is not
    trimmed, so an address of only spaces is accepted.
    """

    name = "address"

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        return len(value) >= ADDRESS_MIN_LENGTH
