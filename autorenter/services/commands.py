"""Generic Commands — existence-gated Insert, Update and Delete for any entity type.

Invariants:
    - Every command reads before it writes: Insert requires absence,
      Update and Delete require presence
    - Each violated precondition returns a distinct ResultCode; no command
      raises for an expected domain condition
    - At most one lookup plus one commit per execute(); no retries
    - The zero identifier is NOT rejected here (validation gate owns that)

Design Decisions:
    - One class per command, parameterized by entity type: the algorithm is
      written once and instantiated per concrete entity
    - PersistenceContext injected, never constructed: tests pass fakes
"""

import logging
from typing import Generic
from uuid import UUID

from autorenter.core.domain_types import CommitOutcome, EntityState, ResultCode
from autorenter.core.repository_protocols import E, PersistenceContext
from autorenter.core.result import Result

logger = logging.getLogger(__name__)

_COMMIT_CODES = {
    CommitOutcome.COMMITTED: ResultCode.SUCCESS,
    CommitOutcome.CONFLICT: ResultCode.CONFLICT,
    CommitOutcome.FAILED: ResultCode.FAILED,
}


class _Command(Generic[E]):
    def __init__(self, context: PersistenceContext, entity_type: type[E]):
        self.context = context
        self.entity_type = entity_type

    def _log_outcome(self, code: ResultCode, entity_id: UUID, operation: str) -> None:
        if code is ResultCode.SUCCESS:
            return
        logger.warning(
            f"{operation} {self.entity_type.__name__} {entity_id}: {code.value}",
            extra={
                "entity": self.entity_type.__name__,
                "entity_id": str(entity_id),
                "result_code": code.value,
            },
        )


class InsertCommand(_Command[E]):
    """Insert a new entity. Conflict if the identifier already exists."""

    async def execute(self, entity: E) -> Result[UUID]:
        existing = await self.context.find_by_id(self.entity_type, entity.id)
        if existing is not None:
            self._log_outcome(ResultCode.CONFLICT, entity.id, "insert")
            return Result(ResultCode.CONFLICT)

        if self.context.add(entity) is not EntityState.ADDED:
            self._log_outcome(ResultCode.FAILED, entity.id, "insert")
            return Result(ResultCode.FAILED)

        code = _COMMIT_CODES[await self.context.commit()]
        self._log_outcome(code, entity.id, "insert")
        if code is ResultCode.SUCCESS:
            return Result(ResultCode.SUCCESS, entity.id)
        return Result(code)


class UpdateCommand(_Command[E]):
    """Replace the stored fields of an existing entity."""

    async def execute(self, entity: E) -> Result[UUID]:
        existing = await self.context.find_by_id(self.entity_type, entity.id)
        if existing is None:
            self._log_outcome(ResultCode.NOT_FOUND, entity.id, "update")
            return Result(ResultCode.NOT_FOUND)

        state = await self.context.update(entity)
        if state is EntityState.STALE:
            self._log_outcome(ResultCode.CONFLICT, entity.id, "update")
            return Result(ResultCode.CONFLICT)
        if state not in (EntityState.MODIFIED, EntityState.UNCHANGED):
            self._log_outcome(ResultCode.FAILED, entity.id, "update")
            return Result(ResultCode.FAILED)

        code = _COMMIT_CODES[await self.context.commit()]
        self._log_outcome(code, entity.id, "update")
        if code is ResultCode.SUCCESS:
            return Result(ResultCode.SUCCESS, entity.id)
        return Result(code)


class DeleteCommand(_Command[E]):
    """Remove an existing entity. Returns a bare ResultCode (no payload)."""

    async def execute(self, entity: E) -> ResultCode:
        existing = await self.context.find_by_id(self.entity_type, entity.id)
        if existing is None:
            self._log_outcome(ResultCode.NOT_FOUND, entity.id, "delete")
            return ResultCode.NOT_FOUND

        if await self.context.remove(existing) is not EntityState.DELETED:
            self._log_outcome(ResultCode.FAILED, entity.id, "delete")
            return ResultCode.FAILED

        code = _COMMIT_CODES[await self.context.commit()]
        self._log_outcome(code, entity.id, "delete")
        return code
