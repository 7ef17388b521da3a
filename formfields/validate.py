"""
Field validation predicates.

Each function takes the submitted value of a single field and returns True
if it satisfies the field's format rule. They never raise: malformed,
empty or non-string input is simply False. The rules always use the
built-in validators, whatever has been registered under the same name.
"""

from formfields.validators.address import AddressValidator
from formfields.validators.email import EmailValidator
from formfields.validators.name import NameValidator
from formfields.validators.phone import PhoneValidator
from formfields.validators.postcode import PostcodeValidator
from formfields.validators.url import UrlValidator
from formfields.validators.ip_address import IpAddressValidator

_address = AddressValidator()
_email = EmailValidator()
_name = NameValidator()
_phone_number = PhoneValidator()
_postcode = PostcodeValidator()
_url = UrlValidator()
_ip_address = IpAddressValidator()


def validate_address(address: str) -> bool:
    """Validate an address. Currently just checks that some input was given."""
    return _address(address)


def validate_email(email: str) -> bool:
    """Validate the format of an email address."""
    return _email(email)


def validate_name(name: str) -> bool:
    """Validate that a name is between 2 and 34 characters long."""
    return _name(name)


def validate_phone_number(phone: str) -> bool:
    """Validate the format of a UK phone number."""
    return _phone_number(phone)


def validate_postcode(postcode: str) -> bool:
    """
    Validate the format of a UK postcode.

    All existing UK postcodes pass; some non-existent ones may too if they
    follow the standard format.
    """
    return _postcode(postcode)


def validate_url(url: str) -> bool:
    """Validate the format of an http, https or ftp URL with a public host."""
    return _url(url)


def validate_ip_address(ip_address: str) -> bool:
    """Validate that a value contains an IPv6 or (loosely) an IPv4 address."""
    return _ip_address(ip_address)
