"""Vehicle ORM — a rentable vehicle parked at one Location.

Invariants:
    - id is UUID primary key, assigned before insert and never changed
    - location_id references locations.id by identifier only (no back_populates)
    - version is the optimistic-concurrency token

Design Decisions:
    - No relationship back to Location: the vehicle holds a non-owning
      reference, services resolve the Location by id when they need it
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from autorenter.db.base import Base


class Vehicle(Base):
    """Vehicle entity — belongs to exactly one Location."""
    __tablename__ = "vehicles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    vin: Mapped[str] = mapped_column(String(17), nullable=False)
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    miles: Mapped[int | None] = mapped_column(Integer, nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_rent_to_own: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    location_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
