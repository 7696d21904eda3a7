"""Domain Types — identity types and the closed tag sets shared by every layer.

Invariants:
    - LocationId, VehicleId wrap UUIDs; EMPTY_ID (all zero bits) is the reserved
      "absent/invalid" sentinel and is never a valid identifier
    - ResultCode is a closed set used only for dispatch (no ordering meaning)
    - EntityState and CommitOutcome are the only signals the persistence
      boundary reports back to commands

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log fields without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

LocationId = NewType("LocationId", UUID)
VehicleId = NewType("VehicleId", UUID)

EMPTY_ID = UUID(int=0)


# ─── Enums ───────────────────────────────────────────────────────

class ResultCode(str, Enum):
    """Outcome tag returned by every service-layer operation."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    FAILED = "failed"
    UNKNOWN = "unknown"


class EntityState(str, Enum):
    """State reported after staging a mutation in the persistence context."""
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"
    DETACHED = "detached"    # record vanished between lookup and staging
    STALE = "stale"          # caller's version token differs from stored one


class CommitOutcome(str, Enum):
    """Result of flushing staged changes to the store."""
    COMMITTED = "committed"
    CONFLICT = "conflict"
    FAILED = "failed"


class Operation(str, Enum):
    """Mutation kinds a validator can be asked about."""
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class ResponseKind(str, Enum):
    """Which success status a controller action produces."""
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ACCEPT = "accept"
