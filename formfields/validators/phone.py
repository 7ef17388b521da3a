"""Phone Validator"""

import re

from formfields.validators.base import BaseValidator


class PhoneValidator(BaseValidator):
    """
    Validates UK phone numbers.

    Accepts the three national groupings (4+3+3, 3+3+4 and 2+4+4 digits
    after the leading zero). The area code is written either as +44 followed
    by the code without its zero, or with the zero and optional parentheses.
    An extension of 3 or 4 digits may follow a '#'.
    """

    name = "phone_number"

    PHONE_PATTERN = re.compile(
        r"^("
        r"((\+44\s?\d{4}|\(?0\d{4}\)?)\s?\d{3}\s?\d{3})"
        r"|((\+44\s?\d{3}|\(?0\d{3}\)?)\s?\d{3}\s?\d{4})"
        r"|((\+44\s?\d{2}|\(?0\d{2}\)?)\s?\d{4}\s?\d{4})"
        r")(\s?\#(\d{4}|\d{3}))?$",
        re.ASCII,
    )

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        return self.PHONE_PATTERN.match(value) is not None
