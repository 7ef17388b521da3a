"""
Pydantic Field Types

Annotated string types that run the field predicates when a pydantic model
is validated, for use on request and intake models:

    class ContactForm(BaseModel):
        name: Name
        email: Email
        phone: Optional[PhoneNumber] = None

Values are returned unchanged.
"""

from typing import Annotated, Callable

from pydantic import AfterValidator

from formfields.validate import (
    validate_address,
    validate_email,
    validate_name,
    validate_phone_number,
    validate_postcode,
    validate_url,
    validate_ip_address,
)


def _field_check(label: str, predicate: Callable[[str], bool]) -> AfterValidator:
    def check(value: str) -> str:
        if not predicate(value):
            raise ValueError(f"invalid {label}")
        return value

    return AfterValidator(check)


Address = Annotated[str, _field_check("address", validate_address)]
Email = Annotated[str, _field_check("email address", validate_email)]
Name = Annotated[str, _field_check("name", validate_name)]
PhoneNumber = Annotated[str, _field_check("phone number", validate_phone_number)]
Postcode = Annotated[str, _field_check("postcode", validate_postcode)]
Url = Annotated[str, _field_check("URL", validate_url)]
IpAddress = Annotated[str, _field_check("IP address", validate_ip_address)]
