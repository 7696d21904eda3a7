"""Controllers — verifies request-shape checks and status dispatch without a web server.

Invariants:
    - Malformed or zero identifiers answer 400 and never reach the service
    - Each ResultCode from the service maps to the same status for every controller
    - POST without id stamps a fresh uuid; PUT stamps the path id
"""

import json
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from autorenter.api.controllers import LocationsController, VehiclesController
from autorenter.api.respond import ResultResponder
from autorenter.core.domain_types import ResultCode
from autorenter.core.result import Result
from autorenter.models.location import Location
from autorenter.schemas.location import LocationModel
from autorenter.schemas.vehicle import VehicleModel


def _locations(**service_results) -> tuple[LocationsController, AsyncMock]:
    service = AsyncMock()
    for name, value in service_results.items():
        getattr(service, name).return_value = value
    return LocationsController(service, ResultResponder()), service


# ─── identifier gate ─────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["indy", "00000000-0000-0000-0000-000000000000", ""])
async def test_bad_identifier_never_reaches_service(raw):
    controller, service = _locations()

    res = await controller.get(raw)

    assert res.status_code == 400
    assert "x-status-reason" in res.headers
    service.get.assert_not_awaited()


async def test_delete_bad_identifier_never_reaches_service():
    controller, service = _locations()
    res = await controller.delete("abc")
    assert res.status_code == 400
    service.delete.assert_not_awaited()


# ─── status dispatch ─────────────────────────────────────────────

@pytest.mark.parametrize("code,status", [
    (ResultCode.NOT_FOUND, 404),
    (ResultCode.BAD_REQUEST, 400),
    (ResultCode.CONFLICT, 409),
    (ResultCode.FAILED, 500),
    (ResultCode.UNKNOWN, 500),
])
async def test_failure_codes_have_empty_bodies(code, status):
    controller, _ = _locations(get=Result(code))
    res = await controller.get(str(uuid4()))
    assert res.status_code == status
    assert res.body == b""


@pytest.mark.parametrize("code,status", [
    (ResultCode.SUCCESS, 204),
    (ResultCode.NOT_FOUND, 404),
    (ResultCode.FAILED, 500),
])
async def test_delete_dispatch(code, status):
    controller, _ = _locations(delete=code)
    res = await controller.delete(str(uuid4()))
    assert res.status_code == status


async def test_get_wraps_payload_in_named_field():
    location = Location(id=uuid4(), site_id="1", name="Indy", version=1)
    controller, _ = _locations(get=Result(ResultCode.SUCCESS, location))

    res = await controller.get(str(location.id))

    assert res.status_code == 200
    assert json.loads(res.body)["location"]["id"] == str(location.id)


async def test_get_all_sets_total_count():
    locations = [
        Location(id=uuid4(), site_id=str(n), name=f"Site {n}", version=1)
        for n in range(3)
    ]
    controller, _ = _locations(get_all=Result(ResultCode.SUCCESS, locations))

    res = await controller.get_all()

    assert res.headers["x-total-count"] == "3"
    assert len(json.loads(res.body)["locations"]) == 3


async def test_get_all_not_found_maps_to_404():
    controller, _ = _locations(get_all=Result(ResultCode.NOT_FOUND))
    res = await controller.get_all()
    assert res.status_code == 404


# ─── POST / PUT ──────────────────────────────────────────────────

async def test_post_assigns_id_when_absent():
    controller, service = _locations()
    service.insert.side_effect = lambda entity: Result(ResultCode.SUCCESS, entity.id)

    res = await controller.post(LocationModel(site_id="1", name="Indy"))

    assert res.status_code == 201
    new_id = UUID(json.loads(res.body))
    assert res.headers["location"] == f"/api/v1/locations/{new_id}"


async def test_post_bad_request_carries_details():
    controller, _ = _locations(insert=Result.bad_request(["name is required"]))
    res = await controller.post(LocationModel(site_id="1"))
    assert res.status_code == 400
    assert json.loads(res.body)["error"]["details"] == [{"message": "name is required"}]


async def test_put_stamps_path_id():
    path_id = uuid4()
    controller, service = _locations(update=Result(ResultCode.SUCCESS, path_id))

    res = await controller.put(str(path_id), LocationModel(site_id="1", name="Indy"))

    assert res.status_code == 200
    assert service.update.await_args.args[0].id == path_id


async def test_put_conflict_maps_to_409():
    controller, _ = _locations(update=Result(ResultCode.CONFLICT))
    res = await controller.put(str(uuid4()), LocationModel(site_id="1", name="Indy"))
    assert res.status_code == 409


async def test_vehicles_controller_uses_same_mapping():
    service = AsyncMock()
    service.insert.return_value = Result(ResultCode.CONFLICT)
    controller = VehiclesController(service, ResultResponder())

    res = await controller.post(VehicleModel(vin="V", make="Ford", model="F-150"))

    assert res.status_code == 409


async def test_location_vehicles_bad_identifier():
    controller, service = _locations()
    res = await controller.get_vehicles("not-a-guid")
    assert res.status_code == 400
    service.get_vehicles.assert_not_awaited()
