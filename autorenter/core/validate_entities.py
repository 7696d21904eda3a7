"""Entity Validators — structural checks run before any mutation reaches persistence.

Invariants:
    - All checks are PURE: no IO, no async, no DB
    - check() returns a list of failure messages; empty list means valid
    - validate_for_insert/update/delete return booleans derived from check()
    - Delete validation only requires a usable identifier
    - run_validation_gate returns a BAD_REQUEST Result on violation, None on success

Design Decisions:
    - One validator class per entity type sharing EntityValidator's dispatch:
      services hold a validator instance and never branch on entity type
    - Messages returned (not raised): the service folds them into a
      BAD_REQUEST Result so the error path has the same shape as success
"""

from abc import ABC, abstractmethod
from datetime import date

from autorenter.core.domain_types import Operation
from autorenter.core.identifiers import is_empty_id
from autorenter.core.repository_protocols import (
    Entity, LocationLike, LogEntryLike, VehicleLike,
)
from autorenter.core.result import Result

FIRST_MODEL_YEAR = 1886
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _require(value, field: str) -> list[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return [f"{field} is required"]
    return []


def _require_id(value, field: str = "id") -> list[str]:
    if is_empty_id(value):
        return [f"{field} must be a non-empty identifier"]
    return []


class EntityValidator(ABC):
    """Dispatches an operation to the per-operation check of a subclass."""

    def check(self, entity: Entity, operation: Operation) -> list[str]:
        if operation is Operation.INSERT:
            return self.check_insert(entity)
        if operation is Operation.UPDATE:
            return self.check_update(entity)
        return self.check_delete(entity)

    @abstractmethod
    def check_insert(self, entity: Entity) -> list[str]: ...

    def check_update(self, entity: Entity) -> list[str]:
        return self.check_insert(entity)

    def check_delete(self, entity: Entity) -> list[str]:
        return _require_id(entity.id)

    def validate_for_insert(self, entity: Entity) -> bool:
        return not self.check_insert(entity)

    def validate_for_update(self, entity: Entity) -> bool:
        return not self.check_update(entity)

    def validate_for_delete(self, entity: Entity) -> bool:
        return not self.check_delete(entity)


class LocationValidator(EntityValidator):
    """site_id and name are mandatory for a Location."""

    def check_insert(self, entity: LocationLike) -> list[str]:
        return (
            _require_id(entity.id)
            + _require(entity.site_id, "site_id")
            + _require(entity.name, "name")
        )


class VehicleValidator(EntityValidator):
    """VIN, make, model and owning location are mandatory for a Vehicle."""

    def check_insert(self, entity: VehicleLike) -> list[str]:
        errors = (
            _require_id(entity.id)
            + _require(entity.vin, "vin")
            + _require(entity.make, "make")
            + _require(entity.model, "model")
            + _require_id(entity.location_id, "location_id")
        )
        if entity.year is not None and not (
            FIRST_MODEL_YEAR <= entity.year <= date.today().year + 1
        ):
            errors.append(
                f"year must be between {FIRST_MODEL_YEAR} and {date.today().year + 1}",
            )
        if entity.miles is not None and entity.miles < 0:
            errors.append("miles cannot be negative")
        return errors


class LogEntryValidator(EntityValidator):
    """Client log records need a message and a known level. Only inserted."""

    def check_insert(self, entry: LogEntryLike) -> list[str]:
        errors = _require(entry.message, "message") + _require(entry.level, "level")
        if not errors and entry.level.strip().lower() not in LOG_LEVELS:
            errors.append(f"level must be one of: {', '.join(LOG_LEVELS)}")
        return errors


def run_validation_gate(
    validator: EntityValidator, entity: Entity, operation: Operation,
) -> Result | None:
    """Check entity for operation. Returns a BAD_REQUEST Result or None."""
    errors = validator.check(entity, operation)
    if errors:
        return Result.bad_request(errors)
    return None
