"""Location Schemas — API projection of the Location entity.

Invariants:
    - Every field optional on input: presence is checked by LocationValidator
    - id in the body is honoured on create (client-specified identifiers)
    - version is echoed back on read and accepted on update as a concurrency token
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from autorenter.models.location import Location

from autorenter.schemas.vehicle import INT_MAX, INT_MIN


class LocationModel(BaseModel):
    """Location as sent and received over HTTP."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID | None = None
    site_id: str | None = Field(None, max_length=50)
    name: str | None = Field(None, max_length=200)
    address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip_code: str | None = Field(None, max_length=20)
    version: int | None = Field(None, ge=INT_MIN, le=INT_MAX)

    def to_entity(self, entity_id: UUID) -> Location:
        """Build a transient Location carrying the given identifier."""
        return Location(
            id=entity_id,
            site_id=self.site_id,
            name=self.name,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            version=self.version,
        )

    @classmethod
    def from_entity(cls, location: Location) -> dict:
        return cls.model_validate(location).model_dump(mode="json")
