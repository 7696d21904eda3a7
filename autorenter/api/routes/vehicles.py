"""Vehicle Routes — /api/v1/vehicles CRUD."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from autorenter.api.controllers import VehiclesController
from autorenter.api.respond import ResultResponder
from autorenter.infrastructure.database import get_db
from autorenter.schemas.vehicle import VehicleModel
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext
from autorenter.services.vehicle_service import VehicleService

PREFIX = "/api/v1/vehicles"
router = APIRouter(prefix=PREFIX, tags=["vehicles"])


def get_vehicles_controller(
    db: AsyncSession = Depends(get_db),
) -> VehiclesController:
    service = VehicleService(SqlAlchemyPersistenceContext(db))
    return VehiclesController(service, ResultResponder(), base_path=PREFIX)


@router.get("")
async def list_vehicles(
    controller: VehiclesController = Depends(get_vehicles_controller),
) -> Response:
    return await controller.get_all()


@router.get("/{vehicle_id}", name="get_vehicle")
async def get_vehicle(
    vehicle_id: str,
    controller: VehiclesController = Depends(get_vehicles_controller),
) -> Response:
    return await controller.get(vehicle_id)


@router.post("")
async def create_vehicle(
    body: VehicleModel,
    controller: VehiclesController = Depends(get_vehicles_controller),
) -> Response:
    return await controller.post(body)


@router.put("/{vehicle_id}")
async def update_vehicle(
    vehicle_id: str, body: VehicleModel,
    controller: VehiclesController = Depends(get_vehicles_controller),
) -> Response:
    return await controller.put(vehicle_id, body)


@router.delete("/{vehicle_id}")
async def delete_vehicle(
    vehicle_id: str,
    controller: VehiclesController = Depends(get_vehicles_controller),
) -> Response:
    return await controller.delete(vehicle_id)
