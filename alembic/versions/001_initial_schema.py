"""Initial schema — locations and vehicles.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "locations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("site_id", sa.String(50), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.String(200), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("version", sa.Integer, nullable=False),
    )

    op.create_table(
        "vehicles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("vin", sa.String(17), nullable=False),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("miles", sa.Integer, nullable=True),
        sa.Column("color", sa.String(50), nullable=True),
        sa.Column("is_rent_to_own", sa.Boolean, nullable=False, server_default="false"),
        sa.Column(
            "location_id", UUID(as_uuid=True),
            sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("version", sa.Integer, nullable=False),
    )
    op.create_index("ix_vehicles_location_id", "vehicles", ["location_id"])


def downgrade() -> None:
    op.drop_index("ix_vehicles_location_id", table_name="vehicles")
    op.drop_table("vehicles")
    op.drop_table("locations")
