"""Service test fixtures — async DB, persistence context, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions (one per request)
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows committed by the client are visible to test_db assertions
    - Fixtures build real services over real sessions; fakes live in the
      individual test modules that need failure paths
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import autorenter.infrastructure.database as db_module
from autorenter.db.base import Base
from autorenter.infrastructure.database import DatabaseSessionManager, get_db
from autorenter.main import app
from autorenter.models.location import Location
from autorenter.models.vehicle import Vehicle
from autorenter.services.persistence_context import SqlAlchemyPersistenceContext


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def context(test_db):
    return SqlAlchemyPersistenceContext(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_location(test_session_factory):
    """Insert one committed location through its own session."""
    async with test_session_factory() as session:
        location = Location(
            site_id="1", name="Indy", city="Indianapolis", state="IN",
        )
        session.add(location)
        await session.commit()
        return location


@pytest.fixture
async def seed_vehicle(test_session_factory, seed_location):
    """Insert one committed vehicle parked at seed_location."""
    async with test_session_factory() as session:
        vehicle = Vehicle(
            vin="1HGCM82633A004352", make="Honda", model="Accord",
            year=2016, miles=42150, color="Silver",
            location_id=seed_location.id,
        )
        session.add(vehicle)
        await session.commit()
        return vehicle
