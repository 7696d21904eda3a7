"""Location ORM — a rental site that owns its fleet of vehicles.

Invariants:
    - id is UUID primary key, assigned before insert and never changed
    - site_id and name are non-nullable
    - version is the optimistic-concurrency token (incremented by SQLAlchemy on update)

Design Decisions:
    - cascade delete-orphan for vehicles: a Location exclusively owns its fleet
    - selectin loading: relationship is safe to touch inside async sessions
"""

import uuid

from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autorenter.db.base import Base


class Location(Base):
    """Location aggregate root — owns its Vehicle collection."""
    __tablename__ = "locations"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    site_id: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    vehicles: Mapped[list["Vehicle"]] = relationship(
        "Vehicle", cascade="all, delete-orphan", lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}
