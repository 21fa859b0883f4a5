"""
Pydantic models for fire stations and the coverage queries.

A fire station entry maps one address to the number of the station
covering it.  The remaining models are the results of the coverage
queries: persons covered by a station, homes grouped by address for
flood alerts, and the residents of one address for fire alerts.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .fields import check_address, field_error


class FireStation(BaseModel):
    address: str = Field(..., examples=["1509 Culver St"])
    station: int = Field(..., examples=[3])


class FireStationIn(FireStation):
    """Schema for creating, updating or deleting a fire station mapping."""

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return check_address(v)

    @field_validator("station")
    @classmethod
    def validate_station(cls, v: int) -> int:
        if v <= 0:
            raise field_error("Station must be a positive number")
        return v


class StationCoveragePerson(BaseModel):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    address: str
    phone: str

    model_config = {
        "populate_by_name": True,
    }


class StationCoverage(BaseModel):
    """Persons covered by one station, with adult and child counts."""

    adult_count: int = Field(..., alias="adultCount")
    child_count: int = Field(..., alias="childCount")
    persons: List[StationCoveragePerson] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }


class ResidentMedicalInfo(BaseModel):
    """A resident annotated with the fields of their medical record.

    ``age`` is ``None`` when the resident has no medical record.
    """

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    phone: str
    age: Optional[int] = None
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }


class Flood(BaseModel):
    """Homes covered by one station, keyed by address."""

    station: int
    homes: Dict[str, List[ResidentMedicalInfo]] = Field(default_factory=dict)


class Fire(BaseModel):
    """Residents of one address and the station covering it."""

    station: int
    persons: List[ResidentMedicalInfo] = Field(default_factory=list)
