"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Location is the aggregate root; each Vehicle belongs to exactly one Location

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from autorenter.models.location import Location  # noqa: F401
from autorenter.models.vehicle import Vehicle  # noqa: F401
