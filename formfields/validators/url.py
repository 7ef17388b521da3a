"""URL Validator"""

import re

from formfields.validators.base import BaseValidator

# Host characters: lower-case ASCII letters, digits and U+00A1 to U+FFFF
_HOST_CHARS = r"a-z\u00a1-\uffff0-9"
_TLD_CHARS = r"a-z\u00a1-\uffff"
_LABEL = rf"[{_HOST_CHARS}]+(?:-[{_HOST_CHARS}]+)*"

_PRIVATE_NETWORKS = (
    r"(?!10(?:\.\d{1,3}){3})"
    r"(?!127(?:\.\d{1,3}){3})"
    r"(?!169\.254(?:\.\d{1,3}){2})"
    r"(?!192\.168(?:\.\d{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})"
)
_PUBLIC_IPV4 = (
    _PRIVATE_NETWORKS
    + r"(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])"
    + r"(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}"
    + r"(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))"
)
_DOMAIN = rf"{_LABEL}(?:\.{_LABEL})*(?:\.[{_TLD_CHARS}]{{2,}})"


class UrlValidator(BaseValidator):
    """
    Validates http, https and ftp URLs.

    The host is either a public IPv4 address or a lower-case domain name
    ending in a top-level label of at least two letters. Private and
    reserved networks (10/8, 127/8, 169.254/16, 192.168/16, 172.16/12) are
    rejected. Userinfo, a 2-5 digit port and a path are optional.
    """

    name = "url"

    URL_PATTERN = re.compile(
        r"^(?:(?:https?|ftp)://)"
        r"(?:\S+@)?"
        rf"(?:{_PUBLIC_IPV4}|{_DOMAIN})"
        r"(?::\d{2,5})?"
        r"(?:/\S*)?$",
        re.ASCII,
    )

    WHITESPACE = re.compile(r"\s", re.ASCII)

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        # Nothing after the scheme may contain whitespace; '$' still allows a trailing newline
        body = value[:-1] if value.endswith("\n") else value
        if self.WHITESPACE.search(body):
            return False

        return self.URL_PATTERN.match(value) is not None
