# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every test runs against its own copy of a small data document written to
# tmp_path; the application store is pointed at that copy so the bundled
# data.json is never touched.
# =============================================================================

import asyncio
import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from safetynet_alerts_api.app.core.store import configure_store
from safetynet_alerts_api.app.main import app


def born_years_ago(years: int) -> str:
    """Birthdate (MM/dd/yyyy) of someone exactly ``years`` old today."""
    return f"01/01/{date.today().year - years}"


def run(coro):
    """Run a service coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def sample_data():
    """Document with two households, a person without medical record and
    a station covering an address where nobody lives."""
    return {
        "persons": [
            {"firstName": "John", "lastName": "Boyd", "address": "1509 Culver St", "city": "Culver",
             "zip": "97451", "phone": "841-874-6512", "email": "jaboyd@email.com"},
            {"firstName": "Jacob", "lastName": "Boyd", "address": "1509 Culver St", "city": "Culver",
             "zip": "97451", "phone": "841-874-6513", "email": "drk@email.com"},
            {"firstName": "Tenley", "lastName": "Boyd", "address": "1509 Culver St", "city": "Culver",
             "zip": "97451", "phone": "841-874-6512", "email": "tenz@email.com"},
            {"firstName": "Peter", "lastName": "Duncan", "address": "644 Gershwin Cir", "city": "Culver",
             "zip": "97451", "phone": "841-874-6512", "email": "peter@email.com"},
            {"firstName": "Eric", "lastName": "Cadigan", "address": "951 LoneTree Rd", "city": "Culver",
             "zip": "97451", "phone": "841-874-7458", "email": "gramps@email.com"},
            {"firstName": "Lily", "lastName": "Cooper", "address": "489 Manchester St", "city": "Springfield",
             "zip": "97452", "phone": "841-874-9845", "email": "lily@email.com"},
        ],
        "firestations": [
            {"address": "1509 Culver St", "station": 3},
            {"address": "644 Gershwin Cir", "station": 1},
            {"address": "951 LoneTree Rd", "station": 2},
            {"address": "489 Manchester St", "station": 4},
            {"address": "29 15th St", "station": 2},
        ],
        "medicalrecords": [
            {"firstName": "John", "lastName": "Boyd", "birthdate": born_years_ago(40),
             "medications": ["aznol:350mg", "hydrapermazol:100mg"], "allergies": ["nillacilan"]},
            {"firstName": "Jacob", "lastName": "Boyd", "birthdate": born_years_ago(35),
             "medications": ["pharmacol:5000mg"], "allergies": []},
            {"firstName": "Tenley", "lastName": "Boyd", "birthdate": born_years_ago(12),
             "medications": [], "allergies": ["peanut"]},
            {"firstName": "Peter", "lastName": "Duncan", "birthdate": born_years_ago(24),
             "medications": [], "allergies": ["shellfish"]},
            {"firstName": "Lily", "lastName": "Cooper", "birthdate": born_years_ago(30),
             "medications": [], "allergies": []},
        ],
    }


@pytest.fixture
def data_file(tmp_path, sample_data):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def store(data_file):
    """Point the application store at the temporary document."""
    return configure_store(data_file)


@pytest.fixture
def read_document(data_file):
    """Return a callable giving the current on-disk document as a dict."""
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def client(store):
    with TestClient(app) as test_client:
        yield test_client
