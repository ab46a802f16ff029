from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PathsConfig(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
        frozen=False,
    )

    log_dir: Path = Field(default=Path("logs"), description="Log file directory")


class PlaceEntryConfig(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        frozen=True,
    )

    name: str = Field(..., description="City name as shown to callers")
    latitude: float | None = Field(
        default=None, description="Latitude in decimal degrees, omitted if unknown"
    )
    longitude: float | None = Field(
        default=None, description="Longitude in decimal degrees, omitted if unknown"
    )

    @model_validator(mode="after")
    def validate_coordinates_pair(self) -> "PlaceEntryConfig":
        """Validate latitude and longitude are given together"""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError(
                f"Place '{self.name}' must set both latitude and longitude or neither"
            )
        return self


class DirectoryConfig(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        frozen=False,
    )

    places: list[PlaceEntryConfig] = Field(
        ..., min_length=1, description="Seed entries of the location directory"
    )


class DistanceConfig(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        frozen=False,
    )

    earth_radius_m: float = Field(
        default=6371008.8, gt=0, description="Mean Earth radius in meters"
    )


class RenderingConfig(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        frozen=False,
    )

    decimal_places: int = Field(
        default=6, ge=0, le=15, description="Digits after the decimal point"
    )
