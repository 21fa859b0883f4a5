# =============================================================================
# tests/test_medical_record_service.py - Medical record CRUD
# =============================================================================

from datetime import date

import pytest

from safetynet_alerts_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from safetynet_alerts_api.app.schemas.medical_record import MedicalRecord
from safetynet_alerts_api.app.schemas.person import PersonIdentifier
from safetynet_alerts_api.app.services.medical_record_service import MedicalRecordService
from tests.conftest import run


def make_record(**overrides):
    fields = dict(
        first_name="Eric", last_name="Cadigan", birthdate=date(1945, 8, 6),
        medications=["tradoxidine:400mg"], allergies=[],
    )
    fields.update(overrides)
    return MedicalRecord(**fields)


def test_create_sorts_by_last_then_first_name(store, read_document):
    run(MedicalRecordService.create_medical_record(make_record()))
    names = [(r.last_name, r.first_name) for r in store.get_data().medical_records]
    assert names == sorted(names)
    created = [r for r in read_document()["medicalrecords"] if r["lastName"] == "Cadigan"]
    assert created == [{
        "firstName": "Eric", "lastName": "Cadigan", "birthdate": "08/06/1945",
        "medications": ["tradoxidine:400mg"], "allergies": [],
    }]


def test_create_existing_conflicts():
    with pytest.raises(AlreadyExistsError, match="John Boyd already exists"):
        run(MedicalRecordService.create_medical_record(make_record(first_name="John", last_name="Boyd")))


def test_update_replaces_record(store):
    run(MedicalRecordService.update_medical_record(
        make_record(first_name="Peter", last_name="Duncan", allergies=["pollen"])
    ))
    peter = [r for r in store.get_data().medical_records if r.first_name == "Peter"][0]
    assert peter.birthdate == date(1945, 8, 6)
    assert peter.allergies == ["pollen"]
    assert store.get_data().medical_records[3].first_name == "Peter"


def test_update_unknown_record():
    with pytest.raises(NotFoundError, match="No medical record found for : Eric Cadigan"):
        run(MedicalRecordService.update_medical_record(make_record()))


def test_delete_ignores_case(store):
    run(MedicalRecordService.delete_medical_record(PersonIdentifier(first_name="tenley", last_name="BOYD")))
    assert ("Tenley", "Boyd") not in [(r.first_name, r.last_name) for r in store.get_data().medical_records]


def test_delete_unknown_record():
    with pytest.raises(NotFoundError):
        run(MedicalRecordService.delete_medical_record(PersonIdentifier(first_name="Eric", last_name="Cadigan")))
