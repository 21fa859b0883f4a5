"""
Top‑level API router.

Aggregates the domain routers.  The alert paths (``/personinfo``,
``/flood/stations``, ...) are part of the public contract, so the
routers are included without a prefix and each declares its full
paths.
"""

from fastapi import APIRouter

from .endpoints import fire_stations, home, medical_records, persons

router = APIRouter()

router.include_router(home.router)
router.include_router(persons.router, tags=["persons"])
router.include_router(medical_records.router, tags=["medical records"])
router.include_router(fire_stations.router, tags=["fire stations"])
