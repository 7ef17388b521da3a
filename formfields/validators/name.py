"""Name Validator"""

from formfields.config.constants import NAME_MIN_LENGTH, NAME_MAX_LENGTH
from formfields.validators.base import BaseValidator


class NameValidator(BaseValidator):
    """Validates display names by length, counted in code points."""

    name = "name"

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        return NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH
