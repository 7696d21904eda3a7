"""SQLAlchemy Persistence Context — verifies staging signals and commit outcomes.

Invariants:
    - add() reports ADDED for a new entity
    - remove() reports DELETED for a persistent entity, DETACHED otherwise
    - update() reports MODIFIED / UNCHANGED / STALE / DETACHED
    - commit() turns a primary-key collision into CONFLICT and rolls back
"""

from uuid import uuid4

from autorenter.core.domain_types import CommitOutcome, EntityState
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext


def _location(**overrides) -> Location:
    fields = {"id": uuid4(), "site_id": "1", "name": "Indy"}
    fields.update(overrides)
    return Location(**fields)


async def test_add_reports_added(context):
    assert context.add(_location()) is EntityState.ADDED


async def test_commit_reports_committed_and_assigns_version(context):
    location = _location()
    context.add(location)
    assert await context.commit() is CommitOutcome.COMMITTED
    assert location.version == 1


async def test_find_by_id_returns_none_when_absent(context):
    assert await context.find_by_id(Location, uuid4()) is None


async def test_find_all_applies_filters(context, seed_vehicle, seed_location):
    other = _location(site_id="2", name="Chicago")
    context.add(other)
    await context.commit()

    at_seed = await context.find_all(Vehicle, location_id=seed_location.id)
    at_other = await context.find_all(Vehicle, location_id=other.id)

    assert [v.id for v in at_seed] == [seed_vehicle.id]
    assert at_other == []
    assert len(await context.find_all(Location)) == 2


async def test_remove_reports_deleted_for_persistent(context, seed_location):
    tracked = await context.find_by_id(Location, seed_location.id)
    assert await context.remove(tracked) is EntityState.DELETED


async def test_remove_reports_detached_for_transient(context):
    assert await context.remove(_location()) is EntityState.DETACHED


async def test_update_reports_modified(context, seed_location):
    state = await context.update(_location(id=seed_location.id, name="Indianapolis"))
    assert state is EntityState.MODIFIED


async def test_update_reports_unchanged_for_identical_values(context, seed_location):
    state = await context.update(_location(
        id=seed_location.id, city="Indianapolis", state="IN",
    ))
    assert state is EntityState.UNCHANGED


async def test_update_reports_stale_on_version_mismatch(context, seed_location):
    state = await context.update(_location(id=seed_location.id, version=7))
    assert state is EntityState.STALE


async def test_update_accepts_matching_version(context, seed_location):
    state = await context.update(_location(
        id=seed_location.id, name="Indianapolis", version=seed_location.version,
    ))
    assert state is EntityState.MODIFIED


async def test_update_reports_detached_when_missing(context):
    assert await context.update(_location()) is EntityState.DETACHED


async def test_commit_maps_duplicate_key_to_conflict(test_session_factory, seed_location):
    async with test_session_factory() as session:
        context = SqlAlchemyPersistenceContext(session)
        context.add(_location(id=seed_location.id))
        assert await context.commit() is CommitOutcome.CONFLICT


async def test_session_usable_after_conflict(test_session_factory, seed_location):
    async with test_session_factory() as session:
        context = SqlAlchemyPersistenceContext(session)
        context.add(_location(id=seed_location.id))
        await context.commit()

        found = await context.find_by_id(Location, seed_location.id)
        assert found is not None
