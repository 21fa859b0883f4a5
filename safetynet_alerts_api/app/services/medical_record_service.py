"""
Service layer for medical records.

Create and update identify a record by the exact first and last name
of its owner; delete matches the names ignoring case.
"""

from __future__ import annotations

import logging

from ..core.exceptions import AlreadyExistsError, NotFoundError
from ..core.store import get_store
from ..schemas.medical_record import MedicalRecord
from ..schemas.person import PersonIdentifier
from .joins import name_key

logger = logging.getLogger(__name__)


def _full_name(entry) -> str:
    return f"{entry.first_name} {entry.last_name}"


class MedicalRecordService:
    """Service class for managing medical records."""

    @classmethod
    async def create_medical_record(cls, record: MedicalRecord) -> None:
        logger.info("Creating medical record : %s", _full_name(record))
        store = get_store()
        with store.transaction() as data:
            if any(name_key(mr) == name_key(record) for mr in data.medical_records):
                logger.error("%s already exists", _full_name(record))
                raise AlreadyExistsError(f"{_full_name(record)} already exists")
            data.medical_records.append(MedicalRecord.model_validate(record.model_dump()))
            store.sort_medical_records_by_last_name_and_first_name(data)
        logger.info("Medical record created : %s", _full_name(record))

    @classmethod
    async def update_medical_record(cls, record: MedicalRecord) -> None:
        logger.info("Updating medical record : %s", _full_name(record))
        with get_store().transaction() as data:
            for index, existing in enumerate(data.medical_records):
                if name_key(existing) == name_key(record):
                    data.medical_records[index] = MedicalRecord.model_validate(record.model_dump())
                    break
            else:
                logger.error("No medical record found for : %s", _full_name(record))
                raise NotFoundError(f"No medical record found for : {_full_name(record)}")
        logger.info("Medical record updated : %s", _full_name(record))

    @classmethod
    async def delete_medical_record(cls, identifier: PersonIdentifier) -> None:
        logger.info("Deleting medical record of : %s", _full_name(identifier))
        with get_store().transaction() as data:
            for index, existing in enumerate(data.medical_records):
                if (
                    existing.first_name.lower() == identifier.first_name.lower()
                    and existing.last_name.lower() == identifier.last_name.lower()
                ):
                    data.medical_records.pop(index)
                    break
            else:
                logger.error("%s not found", _full_name(identifier))
                raise NotFoundError(f"{_full_name(identifier)} not found")
        logger.info("Medical record deleted : %s", _full_name(identifier))
