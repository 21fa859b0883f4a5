"""
Helpers correlating persons, medical records and fire stations.

These are pure functions over a ``Data`` snapshot.  Persons and
medical records are joined on the exact ``(first_name, last_name)``
pair; addresses are compared case-insensitively.  A person without a
medical record has an unknown age (``None``) and is never counted as
a child.
"""

import logging
from datetime import date
from typing import Dict, Optional, Set, Tuple

from ..core.config import settings
from ..core.exceptions import NotFoundError
from ..schemas.data import Data
from ..schemas.medical_record import MedicalRecord
from ..schemas.person import Person

logger = logging.getLogger(__name__)

NameKey = Tuple[str, str]


def name_key(entry) -> NameKey:
    """Identity key of a person or medical record."""
    return entry.first_name, entry.last_name


def same_address(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def map_persons_to_medical_records(data: Data) -> Dict[NameKey, Optional[MedicalRecord]]:
    """Map every person's name key to their medical record.

    The first record with the same exact first and last name wins.
    Persons without a record map to ``None``.
    """
    records: Dict[NameKey, MedicalRecord] = {}
    for record in data.medical_records:
        records.setdefault(name_key(record), record)
    return {name_key(person): records.get(name_key(person)) for person in data.persons}


def get_age(birthdate: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Whole years elapsed since ``birthdate``.

    A year only counts once its anniversary has been reached, so a
    person born on 12/29/2000 is 23 on 12/28/2024 and 24 on 12/29/2024.
    Returns ``None`` for an unknown birthdate.
    """
    if birthdate is None:
        return None
    today = today or date.today()
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def is_child(birthdate: Optional[date], today: Optional[date] = None) -> bool:
    age = get_age(birthdate, today)
    return age is not None and age < settings.child_age_limit


def birthdate_of(person: Person, records: Dict[NameKey, Optional[MedicalRecord]]) -> Optional[date]:
    record = records.get(name_key(person))
    return record.birthdate if record else None


def find_addresses_by_station(data: Data, station: int) -> Set[str]:
    """Addresses covered by ``station``; empty if the station is unknown."""
    return {fs.address for fs in data.fire_stations if fs.station == station}


def get_addresses_by_station(data: Data, station: int) -> Set[str]:
    """Addresses covered by ``station``.

    Raises ``NotFoundError`` if no fire station has that number.
    """
    addresses = find_addresses_by_station(data, station)
    if not addresses:
        logger.error("Station number %s not found", station)
        raise NotFoundError(f"Station number {station} not found")
    return addresses


def persons_at_addresses(data: Data, addresses: Set[str]):
    """Persons living at any of ``addresses``, in document order."""
    wanted = {address.lower() for address in addresses}
    return [person for person in data.persons if person.address.lower() in wanted]
