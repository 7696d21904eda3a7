"""Vehicle Service — façade over the generic commands for Vehicle records.

Invariants:
    - Every mutation passes the validation gate before touching persistence
    - Insert/update require the referenced Location to exist (BAD_REQUEST otherwise);
      that lookup runs only after the structural gate has passed
"""

import logging
from uuid import UUID

from autorenter.core.domain_types import Operation, ResultCode
from autorenter.core.repository_protocols import PersistenceContext
from autorenter.core.result import Result
from autorenter.core.validate_entities import VehicleValidator, run_validation_gate
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.commands import DeleteCommand, InsertCommand, UpdateCommand

logger = logging.getLogger(__name__)


class VehicleService:
    """CRUD for vehicles."""

    def __init__(
        self, context: PersistenceContext,
        validator: VehicleValidator | None = None,
    ):
        self.context = context
        self.validator = validator or VehicleValidator()
        self._insert = InsertCommand(context, Vehicle)
        self._update = UpdateCommand(context, Vehicle)
        self._delete = DeleteCommand(context, Vehicle)

    async def get_all(self) -> Result[list[Vehicle]]:
        vehicles = await self.context.find_all(Vehicle)
        return Result(ResultCode.SUCCESS, vehicles)

    async def get(self, vehicle_id: UUID) -> Result[Vehicle]:
        vehicle = await self.context.find_by_id(Vehicle, vehicle_id)
        if vehicle is None:
            return Result(ResultCode.NOT_FOUND)
        return Result(ResultCode.SUCCESS, vehicle)

    async def insert(self, vehicle: Vehicle) -> Result[UUID]:
        rejected = await self._gate(vehicle, Operation.INSERT)
        if rejected is not None:
            return rejected
        return await self._insert.execute(vehicle)

    async def update(self, vehicle: Vehicle) -> Result[UUID]:
        rejected = await self._gate(vehicle, Operation.UPDATE)
        if rejected is not None:
            return rejected
        return await self._update.execute(vehicle)

    async def delete(self, vehicle_id: UUID) -> ResultCode:
        rejected = await self._gate(Vehicle(id=vehicle_id), Operation.DELETE)
        if rejected is not None:
            return rejected.code
        return await self._delete.execute(Vehicle(id=vehicle_id))

    async def _gate(self, vehicle: Vehicle, operation: Operation) -> Result | None:
        rejected = run_validation_gate(self.validator, vehicle, operation)
        if rejected is None and operation is not Operation.DELETE:
            owner = await self.context.find_by_id(Location, vehicle.location_id)
            if owner is None:
                rejected = Result.bad_request(
                    [f"location_id {vehicle.location_id} does not reference an existing location"],
                )
        if rejected is not None:
            logger.info(
                f"Vehicle {operation.value} rejected: {list(rejected.errors)}",
                extra={"entity": "Vehicle", "entity_id": str(vehicle.id)},
            )
        return rejected
