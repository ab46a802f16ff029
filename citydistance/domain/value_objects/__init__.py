from .city import City
from .location import Location
from .units import (
    METERS_PER_FOOT,
    DegreesLatitude,
    DegreesLongitude,
    Feet,
    Meters,
    Radians,
    degrees_latitude,
    degrees_longitude,
)

__all__ = [
    "City",
    "DegreesLatitude",
    "DegreesLongitude",
    "Feet",
    "Location",
    "METERS_PER_FOOT",
    "Meters",
    "Radians",
    "degrees_latitude",
    "degrees_longitude",
]
