"""Controllers — request-shape checks plus Result-to-response dispatch per resource.

Invariants:
    - Path identifiers are parsed before any service call; a malformed or zero
      identifier yields 400 with x-status-reason and the service is never called
    - Every service Result goes through ResultResponder (one status table)
    - POST honours a client-supplied id, otherwise assigns uuid4 before insert
    - PUT takes the identifier from the path; a disagreeing body id is a 400

Design Decisions:
    - Plain classes built with explicit service + responder: no framework
      objects in the constructor, so unit tests pass AsyncMock services
    - Route functions (api/routes/) only wire dependencies and delegate here
"""

import uuid
from typing import Protocol
from uuid import UUID

from fastapi import Response

from autorenter.api.respond import ResultResponder
from autorenter.core.domain_types import ResultCode
from autorenter.core.identifiers import invalid_identifier_reason, parse_identifier
from autorenter.core.result import Result
from autorenter.schemas.log_entry import LogEntryModel
from autorenter.schemas.location import LocationModel
from autorenter.schemas.vehicle import VehicleModel


class LocationServiceLike(Protocol):
    async def get_all(self) -> Result: ...
    async def get(self, location_id: UUID) -> Result: ...
    async def get_vehicles(self, location_id: UUID) -> Result: ...
    async def insert(self, location) -> Result: ...
    async def update(self, location) -> Result: ...
    async def delete(self, location_id: UUID) -> ResultCode: ...


class ClientLogServiceLike(Protocol):
    def record(self, entry) -> Result: ...


class VehicleServiceLike(Protocol):
    async def get_all(self) -> Result: ...
    async def get(self, vehicle_id: UUID) -> Result: ...
    async def insert(self, vehicle) -> Result: ...
    async def update(self, vehicle) -> Result: ...
    async def delete(self, vehicle_id: UUID) -> ResultCode: ...


def _body_id_mismatch(body_id: UUID | None, path_id: UUID) -> bool:
    return body_id is not None and body_id != path_id


class LocationsController:
    """Actions for /locations and /locations/{id}/vehicles."""

    def __init__(
        self, service: LocationServiceLike, responder: ResultResponder,
        base_path: str = "/api/v1/locations",
    ):
        self.service = service
        self.responder = responder
        self.base_path = base_path

    async def get_all(self) -> Response:
        result = await self.service.get_all()
        return self.responder.read(result, "locations", LocationModel.from_entity)

    async def get(self, raw_id: str) -> Response:
        location_id = parse_identifier(raw_id)
        if location_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        result = await self.service.get(location_id)
        return self.responder.read(result, "location", LocationModel.from_entity)

    async def get_vehicles(self, raw_id: str) -> Response:
        location_id = parse_identifier(raw_id)
        if location_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        result = await self.service.get_vehicles(location_id)
        return self.responder.read(result, "vehicles", VehicleModel.from_entity)

    async def post(self, body: LocationModel) -> Response:
        location = body.to_entity(body.id if body.id is not None else uuid.uuid4())
        result = await self.service.insert(location)
        return self.responder.created(result, lambda new_id: f"{self.base_path}/{new_id}")

    async def put(self, raw_id: str, body: LocationModel) -> Response:
        location_id = parse_identifier(raw_id)
        if location_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        if _body_id_mismatch(body.id, location_id):
            return self.responder.failure(
                Result.bad_request(["body id does not match the path identifier"]),
            )
        result = await self.service.update(body.to_entity(location_id))
        return self.responder.updated(result)

    async def delete(self, raw_id: str) -> Response:
        location_id = parse_identifier(raw_id)
        if location_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        code = await self.service.delete(location_id)
        return self.responder.deleted(code)


class VehiclesController:
    """Actions for /vehicles."""

    def __init__(
        self, service: VehicleServiceLike, responder: ResultResponder,
        base_path: str = "/api/v1/vehicles",
    ):
        self.service = service
        self.responder = responder
        self.base_path = base_path

    async def get_all(self) -> Response:
        result = await self.service.get_all()
        return self.responder.read(result, "vehicles", VehicleModel.from_entity)

    async def get(self, raw_id: str) -> Response:
        vehicle_id = parse_identifier(raw_id)
        if vehicle_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        result = await self.service.get(vehicle_id)
        return self.responder.read(result, "vehicle", VehicleModel.from_entity)

    async def post(self, body: VehicleModel) -> Response:
        vehicle = body.to_entity(body.id if body.id is not None else uuid.uuid4())
        result = await self.service.insert(vehicle)
        return self.responder.created(result, lambda new_id: f"{self.base_path}/{new_id}")

    async def put(self, raw_id: str, body: VehicleModel) -> Response:
        vehicle_id = parse_identifier(raw_id)
        if vehicle_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        if _body_id_mismatch(body.id, vehicle_id):
            return self.responder.failure(
                Result.bad_request(["body id does not match the path identifier"]),
            )
        result = await self.service.update(body.to_entity(vehicle_id))
        return self.responder.updated(result)

    async def delete(self, raw_id: str) -> Response:
        vehicle_id = parse_identifier(raw_id)
        if vehicle_id is None:
            return self.responder.invalid_identifier(invalid_identifier_reason(raw_id))
        code = await self.service.delete(vehicle_id)
        return self.responder.deleted(code)


class LogController:
    """Action for /log: client applications report their own log records."""

    def __init__(self, service: ClientLogServiceLike, responder: ResultResponder):
        self.service = service
        self.responder = responder

    async def post(self, body: LogEntryModel) -> Response:
        return self.responder.accepted(self.service.record(body))
