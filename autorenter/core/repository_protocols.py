"""Boundary Protocols — contracts between the generic commands and persistence.

Invariants:
    - Commands depend only on PersistenceContext, never on SQLAlchemy directly
    - Every staging call reports an EntityState; commit reports a CommitOutcome
    - Implementations provided by services/ via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async in Protocol: implementations do IO; the commands await them and
      contain no IO of their own
"""

from typing import Any, Protocol, TypeVar
from uuid import UUID

from autorenter.core.domain_types import CommitOutcome, EntityState


class Entity(Protocol):
    """Anything with a unique, immutable UUID identifier."""
    id: UUID


E = TypeVar("E", bound=Entity)


class LocationLike(Protocol):
    """Structural contract for Location records seen by validators."""
    id: UUID
    site_id: str | None
    name: str | None


class VehicleLike(Protocol):
    """Structural contract for Vehicle records seen by validators."""
    id: UUID
    vin: str | None
    make: str | None
    model: str | None
    year: int | None
    miles: int | None
    location_id: UUID | None


class LogEntryLike(Protocol):
    """Structural contract for client log records seen by validators."""
    message: str | None
    level: str | None
    source: str | None


class PersistenceContext(Protocol):
    """Request-scoped unit of work — implemented by services/persistence_context.py."""
    async def find_by_id(self, entity_type: type[E], entity_id: UUID) -> E | None: ...
    async def find_all(self, entity_type: type[E], **filters: Any) -> list[E]: ...
    def add(self, entity: Entity) -> EntityState: ...
    async def remove(self, entity: Entity) -> EntityState: ...
    async def update(self, entity: Entity) -> EntityState: ...
    async def commit(self) -> CommitOutcome: ...
