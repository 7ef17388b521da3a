"""IP Address Validator"""

import re

from formfields.validators.base import BaseValidator

_HEX = r"[0-9a-fA-F]{1,4}"
_IPV4_OCTET = r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
_IPV4 = rf"({_IPV4_OCTET}\.){{3,3}}{_IPV4_OCTET}"


class IpAddressValidator(BaseValidator):
    """
    Validates IPv6 and IPv4 addresses.

    Both patterns are searched for anywhere in the value rather than matched
    against the whole of it, so surrounding text is tolerated.

    The IPv4 check is loose: it looks for four numbers in 0-255, each
    followed by any single character or the end of the value. "1.2.3.4"
    passes, and so does "999.999.999.999", which contains "9.999.99" read as
    the numbers 9, 9, 9 and 9 each followed by one character. Use the
    ipaddress module when an exact address is required.
    """

    name = "ip_address"

    IPV6_PATTERN = re.compile(
        "("
        rf"({_HEX}:){{7,7}}{_HEX}"
        rf"|({_HEX}:){{1,7}}:"
        rf"|({_HEX}:){{1,6}}:{_HEX}"
        rf"|({_HEX}:){{1,5}}(:{_HEX}){{1,2}}"
        rf"|({_HEX}:){{1,4}}(:{_HEX}){{1,3}}"
        rf"|({_HEX}:){{1,3}}(:{_HEX}){{1,4}}"
        rf"|({_HEX}:){{1,2}}(:{_HEX}){{1,5}}"
        rf"|{_HEX}:((:{_HEX}){{1,6}})"
        rf"|:((:{_HEX}){{1,7}}|:)"
        r"|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}"
        rf"|::(ffff(:0{{1,4}}){{0,1}}:){{0,1}}{_IPV4}"
        rf"|({_HEX}:){{1,4}}:{_IPV4}"
        ")"
    )

    IPV4_PATTERN = re.compile(r"((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)(.|$)){4}")

    def validate(self, value) -> bool:
        if not isinstance(value, str):
            return False

        return (
            self.IPV6_PATTERN.search(value) is not None
            or self.IPV4_PATTERN.search(value) is not None
        )
