"""Email Validator"""

import re

from formfields.validators.base import BaseValidator

_LOCAL_CHARS = r"a-zA-Z0-9!#$%&'*+/=?^_`{|}~\-"
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"


class EmailValidator(BaseValidator):
    """
    Validates email addresses.

    Based on the WHATWG/HTML "valid e-mail address" grammar, tightened so the
    local part can neither start nor end with '.', and with a separate check
    that the address has no consecutive dots anywhere.
    """

    name = "email"

    EMAIL_PATTERN = re.compile(
        rf"^[{_LOCAL_CHARS}][{_LOCAL_CHARS}.]*(?<!\.)@{_LABEL}(?:\.{_LABEL})*$"
    )

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        if ".." in value:
            return False

        return self.EMAIL_PATTERN.match(value) is not None
