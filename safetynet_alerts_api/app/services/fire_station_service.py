"""
Service layer for fire stations.

Besides CRUD on the ``firestations`` collection this module answers
the coverage queries used during an emergency:

* persons covered by a station, with adult and child counts;
* homes covered by a list of stations, grouped by address;
* phone numbers of the residents covered by a station;
* residents of one address and the station covering it.

A fire station entry is identified by its address (compared ignoring
case) and station number.  Updates look the entry up by address only,
since an address is covered by a single station.

Unknown station numbers are handled differently depending on the
query: coverage and phone lookups raise ``NotFoundError``, while the
homes lookup returns an empty mapping for that station.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Set

from ..core.exceptions import AlreadyExistsError, NotFoundError
from ..core.store import get_store
from ..schemas.data import Data
from ..schemas.fire_station import (
    Fire,
    FireStation,
    Flood,
    ResidentMedicalInfo,
    StationCoverage,
    StationCoveragePerson,
)
from ..schemas.person import Person
from .joins import (
    birthdate_of,
    find_addresses_by_station,
    get_addresses_by_station,
    get_age,
    is_child,
    map_persons_to_medical_records,
    name_key,
    persons_at_addresses,
    same_address,
)

logger = logging.getLogger(__name__)


def _describe(fire_station: FireStation) -> str:
    return f"FireStation {fire_station.station} with address {fire_station.address}"


def _resident_medical_info(person: Person, records) -> ResidentMedicalInfo:
    record = records.get(name_key(person))
    return ResidentMedicalInfo(
        first_name=person.first_name,
        last_name=person.last_name,
        phone=person.phone,
        age=get_age(record.birthdate) if record else None,
        medications=list(record.medications) if record else [],
        allergies=list(record.allergies) if record else [],
    )


class FireStationService:
    """Service class for managing fire stations and coverage queries."""

    @classmethod
    async def create_fire_station(cls, fire_station: FireStation) -> None:
        """Add an address to station mapping and keep the collection sorted by station."""
        logger.info("Creating fire station : %s", _describe(fire_station))
        store = get_store()
        with store.transaction() as data:
            exists = any(
                same_address(fs.address, fire_station.address) and fs.station == fire_station.station
                for fs in data.fire_stations
            )
            if exists:
                logger.error("%s already exists", _describe(fire_station))
                raise AlreadyExistsError(f"{_describe(fire_station)} already exists")
            data.fire_stations.append(FireStation.model_validate(fire_station.model_dump()))
            store.sort_fire_stations_by_station_number(data)
        logger.info("Fire station created : %s", _describe(fire_station))

    @classmethod
    async def update_fire_station(cls, fire_station: FireStation) -> None:
        """Change the station covering ``fire_station.address``."""
        logger.info("Updating fire station : %s", _describe(fire_station))
        with get_store().transaction() as data:
            for index, existing in enumerate(data.fire_stations):
                if same_address(existing.address, fire_station.address):
                    data.fire_stations[index] = FireStation.model_validate(fire_station.model_dump())
                    break
            else:
                logger.error("FireStation with address %s not found", fire_station.address)
                raise NotFoundError(f"FireStation with address {fire_station.address} not found")
        logger.info("Fire station updated : %s", _describe(fire_station))

    @classmethod
    async def delete_fire_station(cls, fire_station: FireStation) -> None:
        logger.info("Deleting fire station : %s", _describe(fire_station))
        with get_store().transaction() as data:
            for index, existing in enumerate(data.fire_stations):
                if same_address(existing.address, fire_station.address) and existing.station == fire_station.station:
                    data.fire_stations.pop(index)
                    break
            else:
                logger.error("%s not found", _describe(fire_station))
                raise NotFoundError(f"{_describe(fire_station)} not found")
        logger.info("Fire station deleted : %s", _describe(fire_station))

    @classmethod
    async def get_addresses_by_station(cls, station_number: int) -> Set[str]:
        """Addresses covered by a station; raises ``NotFoundError`` if none."""
        logger.info("Getting addresses by station number : %s", station_number)
        return get_addresses_by_station(get_store().get_data(), station_number)

    @classmethod
    async def get_persons_station_coverage(cls, station_number: int) -> StationCoverage:
        """Persons covered by a station and how many are adults and children."""
        logger.info("Getting persons station coverage for station number : %s", station_number)
        data = get_store().get_data()
        addresses = get_addresses_by_station(data, station_number)
        records = map_persons_to_medical_records(data)

        covered = persons_at_addresses(data, addresses)
        child_count = sum(1 for person in covered if is_child(birthdate_of(person, records)))
        coverage = StationCoverage(
            adult_count=len(covered) - child_count,
            child_count=child_count,
            persons=[
                StationCoveragePerson(
                    first_name=person.first_name,
                    last_name=person.last_name,
                    address=person.address,
                    phone=person.phone,
                )
                for person in covered
            ],
        )
        logger.info("Successfully got persons station coverage for station number : %s", station_number)
        return coverage

    @classmethod
    async def get_homes_by_stations(cls, stations: List[int]) -> List[Flood]:
        """Residents covered by each station, grouped by their address.

        Stations are reported in the order requested.  An unknown
        station yields an empty ``homes`` mapping instead of an error.
        """
        logger.info("Getting homes by stations : %s", stations)
        data = get_store().get_data()
        records = map_persons_to_medical_records(data)

        floods: List[Flood] = []
        for station_number in stations:
            addresses = find_addresses_by_station(data, station_number)
            homes: Dict[str, List[ResidentMedicalInfo]] = {}
            for person in persons_at_addresses(data, addresses):
                homes.setdefault(person.address, []).append(_resident_medical_info(person, records))
            floods.append(Flood(station=station_number, homes=homes))
        logger.info("Successfully got homes by stations : %s", stations)
        return floods

    @classmethod
    async def get_persons_phones_by_station(cls, station_number: int) -> List[str]:
        """Distinct phone numbers of the persons covered by a station, sorted.

        The ``NotFoundError`` raised for an unknown station is propagated.
        """
        logger.info("Getting persons phones by station number : %s", station_number)
        data = get_store().get_data()
        addresses = get_addresses_by_station(data, station_number)
        phones = {person.phone for person in persons_at_addresses(data, addresses)}
        logger.info("Successfully got persons phones by station number : %s", station_number)
        return sorted(phones)

    @classmethod
    async def get_persons_and_station_by_address(cls, address: str) -> Fire:
        """Residents of ``address`` and the number of the station covering it."""
        logger.info("Getting persons and station by address : %s", address)
        data = get_store().get_data()
        fire_station = cls._find_station_for_address(data, address)
        records = map_persons_to_medical_records(data)
        persons = [
            _resident_medical_info(person, records)
            for person in data.persons
            if same_address(person.address, address)
        ]
        logger.info("Successfully got persons and station by address : %s", address)
        return Fire(station=fire_station.station, persons=persons)

    @staticmethod
    def _find_station_for_address(data: Data, address: str) -> FireStation:
        for fire_station in data.fire_stations:
            if same_address(fire_station.address, address):
                return fire_station
        logger.error("No station found for address : %s", address)
        raise NotFoundError(f"No station found for address: {address}")
