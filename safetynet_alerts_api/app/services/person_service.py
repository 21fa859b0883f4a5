"""
Service layer for persons.

Provides create, update and delete operations on the ``persons``
collection together with the person centred queries: information by
last name, community emails by city and children living at an
address.

Creation and update identify a person by the exact first and last
name.  Deletion and the queries compare names, cities and addresses
case-insensitively.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.exceptions import AlreadyExistsError, NotFoundError
from ..core.store import get_store
from ..schemas.person import ChildInfo, Person, PersonIdentifier, PersonInfo
from .joins import (
    birthdate_of,
    get_age,
    is_child,
    map_persons_to_medical_records,
    name_key,
    same_address,
)

logger = logging.getLogger(__name__)


class PersonService:
    """Service class for managing persons."""

    @classmethod
    async def create_person(cls, person: Person) -> None:
        """Add a person and keep the collection sorted by last then first name.

        Raises ``AlreadyExistsError`` if a person with the same exact
        first and last name is already stored.
        """
        logger.info("Creating person : %s", person.full_name)
        store = get_store()
        with store.transaction() as data:
            if any(name_key(p) == name_key(person) for p in data.persons):
                logger.error("%s already exists", person.full_name)
                raise AlreadyExistsError(f"{person.full_name} already exists")
            data.persons.append(Person.model_validate(person.model_dump()))
            store.sort_persons_by_last_name_and_first_name(data)
        logger.info("Person created : %s", person.full_name)

    @classmethod
    async def update_person(cls, person: Person) -> None:
        """Replace the stored person with the same exact first and last name.

        The entry keeps its position in the collection.
        """
        logger.info("Updating person : %s", person.full_name)
        with get_store().transaction() as data:
            for index, existing in enumerate(data.persons):
                if name_key(existing) == name_key(person):
                    data.persons[index] = Person.model_validate(person.model_dump())
                    break
            else:
                logger.error("%s not found", person.full_name)
                raise NotFoundError(f"{person.full_name} not found")
        logger.info("Person updated : %s", person.full_name)

    @classmethod
    async def delete_person(cls, identifier: PersonIdentifier) -> None:
        """Remove the first person whose names match, ignoring case."""
        full_name = f"{identifier.first_name} {identifier.last_name}"
        logger.info("Deleting person : %s", full_name)
        with get_store().transaction() as data:
            for index, existing in enumerate(data.persons):
                if (
                    existing.first_name.lower() == identifier.first_name.lower()
                    and existing.last_name.lower() == identifier.last_name.lower()
                ):
                    deleted = data.persons.pop(index)
                    break
            else:
                logger.error("%s not found", full_name)
                raise NotFoundError(f"{full_name} not found")
        logger.info("Person deleted : %s", deleted.full_name)

    @classmethod
    async def get_person_by_lastname(cls, lastname: str) -> List[PersonInfo]:
        """Return every person with the given last name and their medical data."""
        logger.info("Getting persons by lastname : %s", lastname)
        data = get_store().get_data()
        records = map_persons_to_medical_records(data)

        persons_info: List[PersonInfo] = []
        for person in data.persons:
            if person.last_name.lower() != lastname.lower():
                continue
            record = records[name_key(person)]
            persons_info.append(
                PersonInfo(
                    first_name=person.first_name,
                    last_name=person.last_name,
                    address=person.address,
                    email=person.email,
                    age=get_age(record.birthdate) if record else None,
                    medications=list(record.medications) if record else [],
                    allergies=list(record.allergies) if record else [],
                )
            )

        if not persons_info:
            logger.error("Lastname: %s not found", lastname)
            raise NotFoundError(f"Lastname: {lastname} not found")
        logger.info("Successfully got persons by lastname : %s", lastname)
        return persons_info

    @classmethod
    async def get_emails_by_city(cls, city: str) -> List[str]:
        """Return the distinct emails of the residents of ``city``, sorted."""
        logger.info("Getting emails by city : %s", city)
        data = get_store().get_data()
        emails = {person.email for person in data.persons if person.city.lower() == city.lower()}
        if not emails:
            logger.error("City: %s not found", city)
            raise NotFoundError(f"City: {city} not found")
        logger.info("Successfully got emails by city : %s", city)
        return sorted(emails)

    @classmethod
    async def get_children_by_address(cls, address: str) -> List[ChildInfo]:
        """Return the children living at ``address`` with their household.

        Raises ``NotFoundError`` if nobody lives at the address.  An
        address where only adults live yields an empty list.
        """
        logger.info("Getting children by address : %s", address)
        data = get_store().get_data()
        residents = [person for person in data.persons if same_address(person.address, address)]
        if not residents:
            logger.error("Address: %s not found", address)
            raise NotFoundError(f"Address: {address} not found")

        records = map_persons_to_medical_records(data)
        children: List[ChildInfo] = []
        for person in residents:
            birthdate = birthdate_of(person, records)
            if not is_child(birthdate):
                continue
            family_members = [
                member.full_name
                for member in residents
                if member.last_name == person.last_name and member.first_name != person.first_name
            ]
            children.append(
                ChildInfo(
                    first_name=person.first_name,
                    last_name=person.last_name,
                    age=get_age(birthdate),
                    family_members=family_members,
                )
            )
        logger.info("Successfully got children by address : %s", address)
        return children
