"""
Fire station endpoints.

CRUD on ``/firestation`` plus the station centred alerts:

- ``GET /firestation?stationnumber=N`` persons covered by a station;
- ``GET /flood/stations?stations=1,2`` homes covered by stations;
- ``GET /phonealert?firestation=N`` phones of covered residents;
- ``GET /fire?address=...`` residents of an address and their station.
"""

import logging
from typing import List

from fastapi import APIRouter, Query, Response, status
from fastapi.exceptions import RequestValidationError

from safetynet_alerts_api.app.schemas.fire_station import Fire, FireStationIn, Flood, StationCoverage
from safetynet_alerts_api.app.services.fire_station_service import FireStationService

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_station_numbers(values: List[str]) -> List[int]:
    """Parse ``?stations=1,2`` and ``?stations=1&stations=2`` alike."""
    stations: List[int] = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if not item:
                continue
            try:
                stations.append(int(item))
            except ValueError:
                raise RequestValidationError(
                    [
                        {
                            "loc": ("query", "stations"),
                            "msg": f"Station number must be an integer, got '{item}'",
                            "type": "int_parsing",
                        }
                    ]
                ) from None
    return stations


@router.post("/firestation", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_fire_station(fire_station: FireStationIn) -> Response:
    """Map an address to a station; 409 if this exact mapping exists."""
    logger.info("Request to create a new fire station : %s", fire_station)
    await FireStationService.create_fire_station(fire_station)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/firestation", response_class=Response)
async def update_fire_station(fire_station: FireStationIn) -> Response:
    """Change the station number covering an address."""
    logger.info("Request to update a fire station : %s", fire_station)
    await FireStationService.update_fire_station(fire_station)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/firestation", response_class=Response)
async def delete_fire_station(fire_station: FireStationIn) -> Response:
    logger.info("Request to delete a fire station : %s", fire_station)
    await FireStationService.delete_fire_station(fire_station)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/firestation", response_model=StationCoverage)
async def get_persons_station_coverage(
    station_number: int = Query(..., alias="stationnumber", examples=[1]),
) -> StationCoverage:
    """Persons covered by a station with the number of adults and children.

    Returns 404 if no address is covered by this station.
    """
    logger.info("Request to get persons covered by the station : %s", station_number)
    return await FireStationService.get_persons_station_coverage(station_number)


@router.get("/flood/stations", response_model=List[Flood])
async def get_homes_by_stations(
    stations: List[str] = Query(..., examples=["1,2"]),
) -> List[Flood]:
    """Homes covered by each station, residents grouped by address.

    Unknown stations are returned with no homes rather than a 404.
    """
    station_numbers = parse_station_numbers(stations)
    logger.info("Request to get homes by this one or several stations : %s", station_numbers)
    return await FireStationService.get_homes_by_stations(station_numbers)


@router.get("/phonealert", response_model=List[str])
async def get_persons_phones_by_station(
    station_number: int = Query(..., alias="firestation", examples=[1]),
) -> List[str]:
    """Phone numbers of every resident covered by a station."""
    logger.info("Request to get telephone numbers of persons covered by the station : %s", station_number)
    return await FireStationService.get_persons_phones_by_station(station_number)


@router.get("/fire", response_model=Fire)
async def get_persons_and_station_by_address(
    address: str = Query(..., examples=["1509 Culver St"]),
) -> Fire:
    """Residents of an address with their medical data, and the covering station.

    Returns 404 if no station covers this address.
    """
    logger.info("Request to get persons and the station by the address : %s", address)
    return await FireStationService.get_persons_and_station_by_address(address)
