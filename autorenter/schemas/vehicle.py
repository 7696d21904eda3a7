"""Vehicle Schemas — API projection of the Vehicle entity.

Invariants:
    - Every field optional on input: presence is checked by VehicleValidator
    - location_id is carried as an identifier, never as a nested Location
    - Integer fields are bounded to the column range so oversized numbers are
      rejected as request errors instead of failing at commit
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from autorenter.models.vehicle import Vehicle

# Signed 32-bit range of the Integer columns
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class VehicleModel(BaseModel):
    """Vehicle as sent and received over HTTP."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID | None = None
    vin: str | None = Field(None, max_length=17)
    make: str | None = Field(None, max_length=100)
    model: str | None = Field(None, max_length=100)
    year: int | None = Field(None, ge=INT_MIN, le=INT_MAX)
    miles: int | None = Field(None, ge=INT_MIN, le=INT_MAX)
    color: str | None = Field(None, max_length=50)
    is_rent_to_own: bool = False
    location_id: UUID | None = None
    version: int | None = Field(None, ge=INT_MIN, le=INT_MAX)

    def to_entity(self, entity_id: UUID) -> Vehicle:
        """Build a transient Vehicle carrying the given identifier."""
        return Vehicle(
            id=entity_id,
            vin=self.vin,
            make=self.make,
            model=self.model,
            year=self.year,
            miles=self.miles,
            color=self.color,
            is_rent_to_own=self.is_rent_to_own,
            location_id=self.location_id,
            version=self.version,
        )

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> dict:
        return cls.model_validate(vehicle).model_dump(mode="json")
