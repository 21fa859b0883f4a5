# =============================================================================
# tests/test_joins.py - Person / medical record / fire station helpers
# =============================================================================

from datetime import date

import pytest

from safetynet_alerts_api.app.core.exceptions import NotFoundError
from safetynet_alerts_api.app.schemas.data import Data
from safetynet_alerts_api.app.services.joins import (
    find_addresses_by_station,
    get_addresses_by_station,
    get_age,
    is_child,
    map_persons_to_medical_records,
    persons_at_addresses,
)


@pytest.fixture
def data(sample_data):
    return Data.model_validate(sample_data)


class TestGetAge:

    def test_day_before_anniversary(self):
        assert get_age(date(2000, 12, 29), today=date(2024, 12, 28)) == 23

    def test_on_anniversary(self):
        assert get_age(date(2000, 12, 29), today=date(2024, 12, 29)) == 24

    def test_earlier_month(self):
        assert get_age(date(2000, 12, 29), today=date(2025, 1, 5)) == 24

    def test_born_today(self):
        assert get_age(date(2024, 3, 1), today=date(2024, 3, 1)) == 0

    def test_unknown_birthdate(self):
        assert get_age(None) is None


class TestIsChild:

    def test_seventeen_is_child(self):
        assert is_child(date(2007, 6, 1), today=date(2025, 5, 31))

    def test_eighteen_is_not_child(self):
        assert not is_child(date(2007, 6, 1), today=date(2025, 6, 1))

    def test_unknown_age_is_not_child(self):
        assert not is_child(None)


class TestMapPersonsToMedicalRecords:

    def test_every_person_is_mapped(self, data):
        records = map_persons_to_medical_records(data)
        assert len(records) == len(data.persons)
        assert records[("John", "Boyd")].medications == ["aznol:350mg", "hydrapermazol:100mg"]

    def test_person_without_record_maps_to_none(self, data):
        records = map_persons_to_medical_records(data)
        assert records[("Eric", "Cadigan")] is None

    def test_names_must_match_exactly(self, data):
        data.medical_records[0].first_name = "JOHN"
        records = map_persons_to_medical_records(data)
        assert records[("John", "Boyd")] is None


class TestAddressesByStation:

    def test_addresses_of_station(self, data):
        assert get_addresses_by_station(data, 2) == {"951 LoneTree Rd", "29 15th St"}

    def test_unknown_station_raises(self, data):
        with pytest.raises(NotFoundError, match="Station number 99 not found"):
            get_addresses_by_station(data, 99)

    def test_find_unknown_station_is_empty(self, data):
        assert find_addresses_by_station(data, 99) == set()

    def test_persons_at_addresses_ignores_case(self, data):
        persons = persons_at_addresses(data, {"1509 CULVER ST"})
        assert [p.first_name for p in persons] == ["John", "Jacob", "Tenley"]
