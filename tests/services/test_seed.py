"""Sample Data — verifies seeding goes through the services and runs only once."""

from autorenter.db.seed import SAMPLE_LOCATIONS, SAMPLE_VEHICLES, seed_sample_data
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext


async def test_seed_inserts_every_sample(test_db):
    inserted = await seed_sample_data(test_db)

    assert inserted == len(SAMPLE_LOCATIONS) + len(SAMPLE_VEHICLES)
    context = SqlAlchemyPersistenceContext(test_db)
    assert len(await context.find_all(Location)) == len(SAMPLE_LOCATIONS)
    assert len(await context.find_all(Vehicle)) == len(SAMPLE_VEHICLES)


async def test_seed_skips_populated_database(test_db, seed_location):
    assert await seed_sample_data(test_db) == 0


async def test_seeded_fleet_is_served(client, test_session_factory):
    async with test_session_factory() as session:
        await seed_sample_data(session)

    location_id = SAMPLE_LOCATIONS[0]["id"]
    res = await client.get(f"/api/v1/locations/{location_id}/vehicles")

    assert res.status_code == 200
    assert len(res.json()["vehicles"]) == 2
