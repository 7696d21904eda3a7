"""Identifier Parsing — request-shape check for path identifiers.

Invariants:
    - parse_identifier is PURE: never raises, returns None for anything unusable
    - The zero UUID is rejected exactly like a malformed string

Design Decisions:
    - Controllers take raw path strings and parse here, so a bad identifier
      produces a 400 with a reason header instead of a framework 422
"""

from uuid import UUID

from autorenter.core.domain_types import EMPTY_ID


def parse_identifier(raw: str | None) -> UUID | None:
    """Parse a canonical UUID string. Returns None if malformed or empty."""
    if not raw:
        return None
    try:
        value = UUID(raw)
    except (ValueError, AttributeError, TypeError):
        return None
    if value == EMPTY_ID:
        return None
    return value


def is_empty_id(value: UUID | None) -> bool:
    return value is None or value == EMPTY_ID


def invalid_identifier_reason(raw: str) -> str:
    """Human-readable reason sent in the x-status-reason header."""
    return (
        f"The value '{raw}' is not recognized as a valid guid "
        f"to uniquely identify a resource."
    )
