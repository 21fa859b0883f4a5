"""
The aggregate data document.

``Data`` mirrors the JSON file on disk: three top‑level arrays named
``persons``, ``firestations`` and ``medicalrecords``.  The whole
document is read and written at once by ``core.store``.
"""

from typing import List

from pydantic import BaseModel, Field

from .fire_station import FireStation
from .medical_record import MedicalRecord
from .person import Person


class Data(BaseModel):
    persons: List[Person] = Field(default_factory=list)
    fire_stations: List[FireStation] = Field(default_factory=list, alias="firestations")
    medical_records: List[MedicalRecord] = Field(default_factory=list, alias="medicalrecords")

    model_config = {
        "populate_by_name": True,
    }
