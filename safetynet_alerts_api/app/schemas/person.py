"""
Pydantic models for person data.

``Person`` is the persisted shape of an entry in the ``persons``
collection and uses the camelCase keys of the data document
(``firstName``, ``lastName``).  ``PersonIn`` adds the field checks
applied to request bodies.  ``PersonIdentifier`` is the body of a
delete request.  ``PersonInfo`` and ``ChildInfo`` are query results
that combine a person with their medical record.
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from .fields import check_address, check_mandatory, check_name, check_phone, check_zip, field_error


class Person(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["John"])
    last_name: str = Field(..., alias="lastName", examples=["Boyd"])
    address: str = Field(..., examples=["1509 Culver St"])
    city: str = Field(..., examples=["Culver"])
    zip: str = Field(..., examples=["97451"])
    phone: str = Field(..., examples=["841-874-6512"])
    email: str = Field(..., examples=["jaboyd@email.com"])

    model_config = {
        "populate_by_name": True,
    }

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PersonIn(Person):
    """Schema for creating or updating a person.

    The identity of a person is the exact ``(firstName, lastName)``
    pair, so an update cannot rename anyone.
    """

    email: EmailStr = Field(..., examples=["jaboyd@email.com"])

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return check_name(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return check_name(v, "Last name")

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return check_address(v)

    @field_validator("city")
    @classmethod
    def validate_city(cls, v: str) -> str:
        check_mandatory(v, "City")
        return check_name(v, "City name")

    @field_validator("zip")
    @classmethod
    def validate_zip(cls, v: str) -> str:
        return check_zip(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return check_phone(v)

    @field_validator("email", mode="wrap")
    @classmethod
    def validate_email(cls, v, handler):
        if v is None or isinstance(v, str):
            check_mandatory(v, "Email")
        try:
            return handler(v)
        except ValidationError:
            raise field_error("Email format is not respected") from None


class PersonIdentifier(BaseModel):
    """First and last name identifying a person or a medical record.

    Used by delete requests, which match names case-insensitively, so
    only presence is checked here.
    """

    first_name: str = Field(..., alias="firstName", examples=["John"])
    last_name: str = Field(..., alias="lastName", examples=["Boyd"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return check_mandatory(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return check_mandatory(v, "Last name")


class PersonInfo(BaseModel):
    """Person details returned by the ``/personinfo`` query.

    ``age`` is ``None`` when the person has no medical record.
    """

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    address: str
    email: str
    age: Optional[int] = None
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }


class ChildInfo(BaseModel):
    """A child living at an address, with the rest of the household."""

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    age: int
    family_members: List[str] = Field(default_factory=list, alias="familyMembers")

    model_config = {
        "populate_by_name": True,
    }
