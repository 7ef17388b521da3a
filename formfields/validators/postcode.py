"""Postcode Validator"""

import re

from formfields.validators.base import BaseValidator


class PostcodeValidator(BaseValidator):
    """
    Validates the format of UK postcodes.

    Every existing UK postcode passes; some non-existent ones do too if they
    follow the standard shape. GIR 0AA (Girobank) is matched explicitly.
    """

    name = "postcode"

    POSTCODE_PATTERN = re.compile(
        r"^([A-Za-z][A-Za-z]?[0-9][A-Za-z0-9]? ?[0-9][A-Za-z]{2}|[Gg][Ii][Rr] ?0[Aa]{2})$"
    )

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        return self.POSTCODE_PATTERN.match(value) is not None
