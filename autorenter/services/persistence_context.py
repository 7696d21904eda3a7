"""SQLAlchemy Persistence Context — request-scoped unit of work behind PersistenceContext.

Invariants:
    - One instance per request, wrapping that request's AsyncSession
    - Staging methods report an EntityState; they never commit
    - commit() maps commit-time constraint failures to CommitOutcome.CONFLICT
      and rolls back; connection/driver failures propagate to the session manager
    - update() copies mapped columns except id and version onto the tracked row

Design Decisions:
    - session.get() for lookups: identity map first, then one SELECT by primary key
    - Version token compared in update() before staging: a stale caller is
      reported as STALE without touching the row; a race that slips past the
      check is caught by SQLAlchemy's version_id_col at commit (StaleDataError)
"""

import logging
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from autorenter.core.domain_types import CommitOutcome, EntityState

logger = logging.getLogger(__name__)

E = TypeVar("E")

# Columns the caller may never overwrite through update()
_PROTECTED_COLUMNS = frozenset({"id", "version"})


class SqlAlchemyPersistenceContext:
    """PersistenceContext implementation over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, entity_type: type[E], entity_id: UUID) -> E | None:
        return await self.db.get(entity_type, entity_id)

    async def find_all(self, entity_type: type[E], **filters: Any) -> list[E]:
        query = select(entity_type).filter_by(**filters)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    def add(self, entity) -> EntityState:
        self.db.add(entity)
        if inspect(entity).pending:
            return EntityState.ADDED
        return EntityState.UNCHANGED

    async def remove(self, entity) -> EntityState:
        if not inspect(entity).persistent:
            return EntityState.DETACHED
        await self.db.delete(entity)
        if entity in self.db.deleted:
            return EntityState.DELETED
        return EntityState.UNCHANGED

    async def update(self, entity) -> EntityState:
        tracked = await self.db.get(type(entity), entity.id)
        if tracked is None:
            return EntityState.DETACHED
        if entity.version is not None and entity.version != tracked.version:
            return EntityState.STALE

        for column in inspect(type(entity)).column_attrs:
            if column.key in _PROTECTED_COLUMNS:
                continue
            setattr(tracked, column.key, getattr(entity, column.key))

        if self.db.is_modified(tracked):
            return EntityState.MODIFIED
        return EntityState.UNCHANGED

    async def commit(self) -> CommitOutcome:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Commit rejected by constraint: {e.orig}")
            return CommitOutcome.CONFLICT
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(f"Commit rejected by row version check: {e}")
            return CommitOutcome.CONFLICT
        return CommitOutcome.COMMITTED
