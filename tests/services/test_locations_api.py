"""Locations API — verifies the full request → gate → command → status round trip.

Invariants:
    - POST new id → 201 + Location header + id body; same id again → 409
    - GET → 200 {"location": {...}}; missing → 404; malformed id → 400 + x-status-reason
    - DELETE → 204, then GET → 404, then DELETE → 404
    - POST without site_id → 400 with validation details, nothing stored
"""

from uuid import uuid4

from autorenter.models.location import Location

BASE = "/api/v1/locations"


async def test_location_lifecycle_scenario(client):
    location_id = str(uuid4())
    body = {"id": location_id, "site_id": "1", "name": "Indy"}

    res = await client.post(BASE, json=body)
    assert res.status_code == 201
    assert res.json() == location_id
    assert res.headers["location"] == f"{BASE}/{location_id}"

    res = await client.post(BASE, json=body)
    assert res.status_code == 409
    assert res.content == b""

    res = await client.get(f"{BASE}/{location_id}")
    assert res.status_code == 200
    assert res.json()["location"]["name"] == "Indy"
    assert res.json()["location"]["site_id"] == "1"

    res = await client.delete(f"{BASE}/{location_id}")
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get(f"{BASE}/{location_id}")
    assert res.status_code == 404

    res = await client.delete(f"{BASE}/{location_id}")
    assert res.status_code == 404


async def test_post_without_site_id_is_rejected(client, test_session_factory):
    location_id = uuid4()
    res = await client.post(
        BASE, json={"id": str(location_id), "site_id": None, "name": "Indy"},
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == [{"message": "site_id is required"}]
    async with test_session_factory() as session:
        assert await session.get(Location, location_id) is None


async def test_post_without_id_assigns_one(client):
    res = await client.post(BASE, json={"site_id": "2", "name": "Chicago"})
    assert res.status_code == 201
    new_id = res.json()

    res = await client.get(f"{BASE}/{new_id}")
    assert res.status_code == 200


async def test_post_with_zero_id_is_rejected(client):
    res = await client.post(BASE, json={
        "id": "00000000-0000-0000-0000-000000000000",
        "site_id": "1", "name": "Indy",
    })
    assert res.status_code == 400


async def test_post_with_wrong_type_is_bad_request(client):
    res = await client.post(BASE, json={"site_id": "1", "name": "Indy", "version": "x"})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.version"


async def test_list_locations(client, seed_location):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert res.headers["x-total-count"] == "1"
    assert [loc["id"] for loc in res.json()["locations"]] == [str(seed_location.id)]


async def test_list_locations_empty(client):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert res.json() == {"locations": []}
    assert res.headers["x-total-count"] == "0"


async def test_get_malformed_id_is_bad_request(client):
    res = await client.get(f"{BASE}/indy")
    assert res.status_code == 400
    assert "indy" in res.headers["x-status-reason"]


async def test_get_zero_id_is_bad_request(client):
    res = await client.get(f"{BASE}/00000000-0000-0000-0000-000000000000")
    assert res.status_code == 400


async def test_delete_malformed_id_is_bad_request(client):
    res = await client.delete(f"{BASE}/not-a-guid")
    assert res.status_code == 400


async def test_put_updates_location(client, seed_location):
    res = await client.put(f"{BASE}/{seed_location.id}", json={
        "site_id": "1", "name": "Indianapolis Downtown",
    })
    assert res.status_code == 200
    assert res.json() == str(seed_location.id)

    res = await client.get(f"{BASE}/{seed_location.id}")
    location = res.json()["location"]
    assert location["name"] == "Indianapolis Downtown"
    assert location["version"] == 2


async def test_put_missing_location_is_not_found(client):
    res = await client.put(f"{BASE}/{uuid4()}", json={"site_id": "1", "name": "Indy"})
    assert res.status_code == 404


async def test_put_stale_version_is_conflict(client, seed_location):
    res = await client.put(f"{BASE}/{seed_location.id}", json={
        "site_id": "1", "name": "Indy", "version": seed_location.version + 5,
    })
    assert res.status_code == 409


async def test_put_body_id_mismatch_is_bad_request(client, seed_location):
    res = await client.put(f"{BASE}/{seed_location.id}", json={
        "id": str(uuid4()), "site_id": "1", "name": "Indy",
    })
    assert res.status_code == 400


async def test_put_invalid_body_is_bad_request(client, seed_location):
    res = await client.put(f"{BASE}/{seed_location.id}", json={"site_id": "1"})
    assert res.status_code == 400
    assert res.json()["error"]["details"] == [{"message": "name is required"}]


async def test_location_vehicles(client, seed_vehicle, seed_location):
    res = await client.get(f"{BASE}/{seed_location.id}/vehicles")
    assert res.status_code == 200
    vehicles = res.json()["vehicles"]
    assert [v["id"] for v in vehicles] == [str(seed_vehicle.id)]
    assert vehicles[0]["location_id"] == str(seed_location.id)


async def test_location_vehicles_unknown_location(client):
    res = await client.get(f"{BASE}/{uuid4()}/vehicles")
    assert res.status_code == 404


async def test_delete_location_removes_its_vehicles(client, seed_vehicle, seed_location):
    res = await client.delete(f"{BASE}/{seed_location.id}")
    assert res.status_code == 204

    res = await client.get(f"/api/v1/vehicles/{seed_vehicle.id}")
    assert res.status_code == 404
