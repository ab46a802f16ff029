from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.city import City
from ..value_objects.location import Location


class Place(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    name: City = Field(..., description="The city this place represents.")
    location: Location | None = Field(
        default=None,
        description="Coordinates of the city, absent when they are unknown.",
    )

    @property
    def has_location(self) -> bool:
        return self.location is not None

    def __str__(self) -> str:
        if self.location is None:
            return f"{self.name} (unknown location)"
        return f"{self.name} ({self.location})"
