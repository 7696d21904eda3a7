"""Sample Data — demo fleet inserted into an empty database on startup.

Invariants:
    - Runs only when settings.seed_sample_data is true and no Location exists
    - Inserts go through the services, so the validation gate and the
      existence checks apply exactly as for API writes
    - Identifiers are fixed: reseeding after a partial run reports CONFLICT, never duplicates
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from autorenter.core.domain_types import ResultCode
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.location_service import LocationService
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext
from autorenter.services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)

SAMPLE_LOCATIONS = [
    {
        "id": UUID("5ff3ef1d-b4be-4d6b-a24c-1b2b02fd5e4b"),
        "site_id": "1", "name": "Indianapolis International Airport",
        "address": "7800 Col. H. Weir Cook Memorial Dr",
        "city": "Indianapolis", "state": "IN", "zip_code": "46241",
    },
    {
        "id": UUID("a3a8f4c2-0a86-4d3b-9d35-9c3b64c8b0f1"),
        "site_id": "2", "name": "Chicago O'Hare International Airport",
        "address": "10000 W O'Hare Ave",
        "city": "Chicago", "state": "IL", "zip_code": "60666",
    },
]

SAMPLE_VEHICLES = [
    {
        "id": UUID("2b8e3a3e-77a1-4a4f-8f6e-1c9d8d6a0b11"),
        "vin": "1HGCM82633A004352", "make": "Honda", "model": "Accord",
        "year": 2016, "miles": 42150, "color": "Silver", "is_rent_to_own": False,
        "location_id": SAMPLE_LOCATIONS[0]["id"],
    },
    {
        "id": UUID("7c0f1d2e-5b7a-4a58-a0d5-3f1e2c4b6d22"),
        "vin": "1FTFW1ET5DFC10312", "make": "Ford", "model": "F-150",
        "year": 2018, "miles": 30500, "color": "Blue", "is_rent_to_own": True,
        "location_id": SAMPLE_LOCATIONS[0]["id"],
    },
    {
        "id": UUID("9e4d6c8a-2f3b-4e1d-b7a9-5c6d7e8f9a33"),
        "vin": "2T1BURHE0JC034461", "make": "Toyota", "model": "Corolla",
        "year": 2019, "miles": 18200, "color": "White", "is_rent_to_own": False,
        "location_id": SAMPLE_LOCATIONS[1]["id"],
    },
]


async def seed_sample_data(db: AsyncSession) -> int:
    """Insert the demo fleet if the database has no locations. Returns rows inserted."""
    context = SqlAlchemyPersistenceContext(db)
    if await context.find_all(Location):
        logger.info("Sample data skipped: locations already present")
        return 0

    locations = LocationService(context)
    vehicles = VehicleService(context)
    inserted = 0
    for data in SAMPLE_LOCATIONS:
        result = await locations.insert(Location(**data))
        if result.code is ResultCode.SUCCESS:
            inserted += 1
    for data in SAMPLE_VEHICLES:
        result = await vehicles.insert(Vehicle(**data))
        if result.code is ResultCode.SUCCESS:
            inserted += 1
    logger.info(f"Sample data seeded: {inserted} records")
    return inserted
