"""
Field level input checks shared by the request schemas.

Each check either returns the value unchanged or raises a
``PydanticCustomError`` whose message is reported verbatim to the
client in the ``{field: message}`` body of a 400 response.  The checks
are only attached to request models; documents read from disk are not
re-validated.
"""

import re
from datetime import date, datetime
from typing import Optional

from pydantic_core import PydanticCustomError

from ..core.exceptions import BIRTHDATE_FORMAT_ERROR, BIRTHDATE_FORMAT_MESSAGE

NAME_PATTERN = re.compile(r"^[A-Z][a-z]*(?:[ '-][A-Z][a-z-' ]*)*$")
ADDRESS_PATTERN = re.compile(r"^\d+ [A-Za-z\d '-]+$")
ZIP_PATTERN = re.compile(r"^\d{5}$")
PHONE_PATTERN = re.compile(r"^\d{3}-\d{3}-\d{4}$")

BIRTHDATE_FORMAT = "%m/%d/%Y"


def field_error(message: str) -> PydanticCustomError:
    return PydanticCustomError("field_format", message)


def check_mandatory(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise field_error(f"{label} is mandatory")
    return value


def check_name(value: str, label: str) -> str:
    """Validate a first name, last name or city name."""
    check_mandatory(value, label)
    if not 2 <= len(value) <= 50:
        raise field_error(f"{label} must be between 2 and 50 characters")
    if not NAME_PATTERN.match(value):
        raise field_error(
            f"{label} must start with an uppercase letter and can only contain "
            "letters, hyphens, spaces and apostrophes"
        )
    return value


def check_address(value: str) -> str:
    check_mandatory(value, "Address")
    if not 5 <= len(value) <= 100:
        raise field_error("Address must be between 5 and 100 characters")
    if not ADDRESS_PATTERN.match(value):
        raise field_error(
            "Address must start with a number followed by a space and then "
            "letters, numbers, spaces, hyphens or apostrophes"
        )
    return value


def check_zip(value: str) -> str:
    check_mandatory(value, "Zipcode")
    if not ZIP_PATTERN.match(value):
        raise field_error("Zip code must be in the format 12345")
    return value


def check_phone(value: str) -> str:
    check_mandatory(value, "Phone number")
    if not PHONE_PATTERN.match(value):
        raise field_error("Phone number must be in the format 123-456-7890")
    return value


def parse_birthdate(value):
    """Parse an ``MM/dd/yyyy`` string into a ``date``.

    ``date`` instances pass through untouched.  Any other input raises
    the dedicated birthdate error so the API can answer 406 instead of
    a generic validation failure.
    """
    if value is None:
        raise field_error("Birthdate is mandatory")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), BIRTHDATE_FORMAT).date()
        except ValueError:
            pass
    raise PydanticCustomError(BIRTHDATE_FORMAT_ERROR, BIRTHDATE_FORMAT_MESSAGE)


def format_birthdate(value: date) -> str:
    return value.strftime(BIRTHDATE_FORMAT)
