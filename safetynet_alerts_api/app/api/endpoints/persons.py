"""
Person endpoints.

CRUD on ``/person`` plus the person centred alerts: ``/personinfo``
(persons with a given last name and their medical data),
``/communityemail`` (emails of a city's residents) and ``/childalert``
(children living at an address).
"""

import logging
from typing import List

from fastapi import APIRouter, Query, Response, status

from safetynet_alerts_api.app.schemas.person import ChildInfo, PersonIdentifier, PersonIn, PersonInfo
from safetynet_alerts_api.app.services.person_service import PersonService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/person", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_person(person: PersonIn) -> Response:
    """Create a person.

    Returns 409 if a person with the same first and last name exists.
    """
    logger.info("Request to create a new person : %s", person.full_name)
    await PersonService.create_person(person)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/person", response_class=Response)
async def update_person(person: PersonIn) -> Response:
    """Update a person's details, found by first and last name."""
    logger.info("Request to update a person : %s", person.full_name)
    await PersonService.update_person(person)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/person", response_class=Response)
async def delete_person(identifier: PersonIdentifier) -> Response:
    """Delete a person by first and last name (case-insensitive)."""
    logger.info("Request to delete a person : %s %s", identifier.first_name, identifier.last_name)
    await PersonService.delete_person(identifier)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/personinfo", response_model=List[PersonInfo])
async def get_person_by_lastname(
    lastname: str = Query(..., examples=["Boyd"]),
) -> List[PersonInfo]:
    """Information and medical data of every person with this last name.

    Returns 404 if nobody has this last name.
    """
    logger.info("Request to get one or several person by the last name : %s", lastname)
    return await PersonService.get_person_by_lastname(lastname)


@router.get("/communityemail", response_model=List[str])
async def get_emails_by_city(
    city: str = Query(..., examples=["Culver"]),
) -> List[str]:
    """Emails of every resident of a city."""
    logger.info("Request to get emails by the city : %s", city)
    return await PersonService.get_emails_by_city(city)


@router.get("/childalert", response_model=List[ChildInfo])
async def get_children_by_address(
    address: str = Query(..., examples=["1509 Culver St"]),
) -> List[ChildInfo]:
    """Children living at an address and the other members of their household.

    The list is empty when only adults live there; 404 is returned when
    nobody does.
    """
    logger.info("Request to get children by the address : %s", address)
    return await PersonService.get_children_by_address(address)
