# =============================================================================
# tests/test_schemas.py - Request schema validation
# =============================================================================

import pytest
from pydantic import ValidationError

from safetynet_alerts_api.app.core.exceptions import BIRTHDATE_FORMAT_ERROR
from safetynet_alerts_api.app.schemas.fire_station import FireStationIn
from safetynet_alerts_api.app.schemas.medical_record import MedicalRecord, MedicalRecordIn
from safetynet_alerts_api.app.schemas.person import PersonIn

VALID_PERSON = {
    "firstName": "Mary-Jane",
    "lastName": "O'Neil",
    "address": "12 Baker's Row",
    "city": "Culver City",
    "zip": "97451",
    "phone": "841-874-0000",
    "email": "mj@email.com",
}


def error_messages(exc_info):
    return {str(e["loc"][-1]): e["msg"] for e in exc_info.value.errors()}


class TestPersonIn:

    def test_valid_person(self):
        person = PersonIn.model_validate(VALID_PERSON)
        assert person.full_name == "Mary-Jane O'Neil"

    @pytest.mark.parametrize("name, message", [
        ("J", "First name must be between 2 and 50 characters"),
        ("J" * 51, "First name must be between 2 and 50 characters"),
        ("john", "First name must start with an uppercase letter and can only contain "
                 "letters, hyphens, spaces and apostrophes"),
        ("Jo3", "First name must start with an uppercase letter and can only contain "
                "letters, hyphens, spaces and apostrophes"),
        ("", "First name is mandatory"),
    ])
    def test_invalid_first_name(self, name, message):
        with pytest.raises(ValidationError) as exc_info:
            PersonIn.model_validate(dict(VALID_PERSON, firstName=name))
        assert error_messages(exc_info) == {"firstName": message}

    def test_short_address(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonIn.model_validate(dict(VALID_PERSON, address="1 A"))
        assert error_messages(exc_info) == {"address": "Address must be between 5 and 100 characters"}


class TestMedicalRecordIn:

    def test_birthdate_parsed_from_wire_format(self):
        record = MedicalRecordIn.model_validate(
            {"firstName": "John", "lastName": "Boyd", "birthdate": "03/06/1984"}
        )
        assert record.birthdate.isoformat() == "1984-03-06"
        assert record.medications == [] and record.allergies == []
        assert record.model_dump(by_alias=True)["birthdate"] == "03/06/1984"

    @pytest.mark.parametrize("birthdate", ["1984-03-06", "13/01/1984", "yesterday", 19840306])
    def test_bad_birthdate_has_dedicated_error(self, birthdate):
        with pytest.raises(ValidationError) as exc_info:
            MedicalRecord.model_validate({"firstName": "John", "lastName": "Boyd", "birthdate": birthdate})
        assert exc_info.value.errors()[0]["type"] == BIRTHDATE_FORMAT_ERROR


class TestFireStationIn:

    def test_negative_station(self):
        with pytest.raises(ValidationError) as exc_info:
            FireStationIn.model_validate({"address": "1509 Culver St", "station": -1})
        assert error_messages(exc_info) == {"station": "Station must be a positive number"}
