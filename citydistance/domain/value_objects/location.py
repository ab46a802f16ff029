from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from .units import DegreesLatitude, DegreesLongitude

_RANGE_ERROR_TYPES = {"greater_than_equal", "less_than_equal"}
_RANGE_MESSAGES = {
    "latitude": "Latitude must be within the range -90 to 90.",
    "longitude": "Longitude must be within the range -180 to 180.",
}


class Location(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    # Field order matters: latitude errors are reported before longitude errors.
    latitude: DegreesLatitude = Field(
        ...,
        ge=-90.0,
        le=90.0,
        allow_inf_nan=False,
        description="Latitude of the location in decimal degrees.",
    )
    longitude: DegreesLongitude = Field(
        ...,
        ge=-180.0,
        le=180.0,
        allow_inf_nan=False,
        description="Longitude of the location in decimal degrees.",
    )

    @classmethod
    def create(
        cls, latitude: DegreesLatitude, longitude: DegreesLongitude
    ) -> "Location":
        """
        Create a Location from a latitude/longitude pair in decimal degrees.

        Args:
            latitude (DegreesLatitude): degrees latitude, -90 to 90 inclusive
            longitude (DegreesLongitude): degrees longitude, -180 to 180 inclusive

        Raises:
            ValidationError: naming the first offending field; latitude is
                checked before longitude
        """
        try:
            return cls(latitude=latitude, longitude=longitude)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0])
            if error["type"] in _RANGE_ERROR_TYPES:
                raise ValidationError(field, _RANGE_MESSAGES[field]) from e
            raise ValidationError(field, error["msg"]) from e

    def get_coordinates(self) -> tuple[DegreesLatitude, DegreesLongitude]:
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"lat {self.latitude:f}, lng {self.longitude:f}"
