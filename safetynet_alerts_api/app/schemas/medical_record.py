"""
Pydantic models for medical records.

A medical record belongs to the person with the exact same first and
last name.  Birthdates travel as ``MM/dd/yyyy`` strings both in the
data document and over HTTP.
"""

from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_serializer, field_validator

from .fields import field_error, check_name, format_birthdate, parse_birthdate


class MedicalRecord(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["John"])
    last_name: str = Field(..., alias="lastName", examples=["Boyd"])
    birthdate: date = Field(..., examples=["03/06/1984"])
    medications: List[str] = Field(default_factory=list, examples=[["aznol:350mg", "hydrapermazol:100mg"]])
    allergies: List[str] = Field(default_factory=list, examples=[["nillacilan"]])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("birthdate", mode="before")
    @classmethod
    def coerce_birthdate(cls, v):
        return parse_birthdate(v)

    @field_serializer("birthdate")
    def serialize_birthdate(self, v: date) -> str:
        return format_birthdate(v)


class MedicalRecordIn(MedicalRecord):
    """Schema for creating or updating a medical record."""

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return check_name(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return check_name(v, "Last name")

    @field_validator("birthdate")
    @classmethod
    def validate_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise field_error("Birthdate can't be in the future")
        return v
