"""
Medical record endpoints.

A birthdate that is not in ``MM/dd/yyyy`` format is answered with
406 Not Acceptable by the validation handler in ``core.exceptions``.
"""

import logging

from fastapi import APIRouter, Response, status

from safetynet_alerts_api.app.schemas.medical_record import MedicalRecordIn
from safetynet_alerts_api.app.schemas.person import PersonIdentifier
from safetynet_alerts_api.app.services.medical_record_service import MedicalRecordService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/medicalrecord", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_medical_record(record: MedicalRecordIn) -> Response:
    """Create a medical record; 409 if one exists for this person."""
    logger.info("Request to create a new medical record : %s %s", record.first_name, record.last_name)
    await MedicalRecordService.create_medical_record(record)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/medicalrecord", response_class=Response)
async def update_medical_record(record: MedicalRecordIn) -> Response:
    logger.info("Request to update a medical record : %s %s", record.first_name, record.last_name)
    await MedicalRecordService.update_medical_record(record)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/medicalrecord", response_class=Response)
async def delete_medical_record(identifier: PersonIdentifier) -> Response:
    logger.info("Request to delete a medical record : %s %s", identifier.first_name, identifier.last_name)
    await MedicalRecordService.delete_medical_record(identifier)
    return Response(status_code=status.HTTP_200_OK)
