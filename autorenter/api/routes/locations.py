"""Location Routes — /api/v1/locations CRUD and the location's fleet.

Invariants:
    - Path ids are accepted as str and parsed by the controller, so malformed
      ids answer 400 with x-status-reason rather than a framework error
    - One AsyncSession per request, wrapped in a fresh persistence context
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from autorenter.api.controllers import LocationsController
from autorenter.api.respond import ResultResponder
from autorenter.infrastructure.database import get_db
from autorenter.schemas.location import LocationModel
from autorenter.services.location_service import LocationService
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext

PREFIX = "/api/v1/locations"
router = APIRouter(prefix=PREFIX, tags=["locations"])


def get_locations_controller(
    db: AsyncSession = Depends(get_db),
) -> LocationsController:
    service = LocationService(SqlAlchemyPersistenceContext(db))
    return LocationsController(service, ResultResponder(), base_path=PREFIX)


@router.get("")
async def list_locations(
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """List all locations."""
    return await controller.get_all()


@router.get("/{location_id}", name="get_location")
async def get_location(
    location_id: str,
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """Get a single location."""
    return await controller.get(location_id)


@router.get("/{location_id}/vehicles")
async def list_location_vehicles(
    location_id: str,
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """List vehicles parked at a location."""
    return await controller.get_vehicles(location_id)


@router.post("")
async def create_location(
    body: LocationModel,
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """Create a location. 201 + Location header on success, 409 on duplicate id."""
    return await controller.post(body)


@router.put("/{location_id}")
async def update_location(
    location_id: str, body: LocationModel,
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """Replace a location's fields."""
    return await controller.put(location_id, body)


@router.delete("/{location_id}")
async def delete_location(
    location_id: str,
    controller: LocationsController = Depends(get_locations_controller),
) -> Response:
    """Delete a location and its vehicles."""
    return await controller.delete(location_id)
