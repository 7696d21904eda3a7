"""Location Service — façade over the generic commands for Location records.

Invariants:
    - Every mutation passes the validation gate before touching persistence
    - Reads return SUCCESS with a (possibly empty) list, or NOT_FOUND for a missing id
    - Deleting a Location removes its vehicles (ORM cascade)
"""

import logging
from uuid import UUID

from autorenter.core.domain_types import Operation, ResultCode
from autorenter.core.repository_protocols import PersistenceContext
from autorenter.core.result import Result
from autorenter.core.validate_entities import LocationValidator, run_validation_gate
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.commands import DeleteCommand, InsertCommand, UpdateCommand

logger = logging.getLogger(__name__)


class LocationService:
    """CRUD plus fleet lookup for locations."""

    def __init__(
        self, context: PersistenceContext,
        validator: LocationValidator | None = None,
    ):
        self.context = context
        self.validator = validator or LocationValidator()
        self._insert = InsertCommand(context, Location)
        self._update = UpdateCommand(context, Location)
        self._delete = DeleteCommand(context, Location)

    async def get_all(self) -> Result[list[Location]]:
        locations = await self.context.find_all(Location)
        return Result(ResultCode.SUCCESS, locations)

    async def get(self, location_id: UUID) -> Result[Location]:
        location = await self.context.find_by_id(Location, location_id)
        if location is None:
            return Result(ResultCode.NOT_FOUND)
        return Result(ResultCode.SUCCESS, location)

    async def get_vehicles(self, location_id: UUID) -> Result[list[Vehicle]]:
        """Vehicles parked at a location; NOT_FOUND if the location does not exist."""
        location = await self.context.find_by_id(Location, location_id)
        if location is None:
            return Result(ResultCode.NOT_FOUND)
        vehicles = await self.context.find_all(Vehicle, location_id=location_id)
        return Result(ResultCode.SUCCESS, vehicles)

    async def insert(self, location: Location) -> Result[UUID]:
        rejected = self._gate(location, Operation.INSERT)
        if rejected is not None:
            return rejected
        return await self._insert.execute(location)

    async def update(self, location: Location) -> Result[UUID]:
        rejected = self._gate(location, Operation.UPDATE)
        if rejected is not None:
            return rejected
        return await self._update.execute(location)

    async def delete(self, location_id: UUID) -> ResultCode:
        rejected = self._gate(Location(id=location_id), Operation.DELETE)
        if rejected is not None:
            return rejected.code
        return await self._delete.execute(Location(id=location_id))

    def _gate(self, location: Location, operation: Operation) -> Result | None:
        rejected = run_validation_gate(self.validator, location, operation)
        if rejected is not None:
            logger.info(
                f"Location {operation.value} rejected: {list(rejected.errors)}",
                extra={"entity": "Location", "entity_id": str(location.id)},
            )
        return rejected
