from .distance_calculator import (
    EARTH_MEAN_RADIUS_M,
    DistanceCalculator,
    IDistanceCalculator,
    meters_to_feet,
)
from .location_directory import ILocationDirectory, LocationDirectory

__all__ = [
    "DistanceCalculator",
    "EARTH_MEAN_RADIUS_M",
    "IDistanceCalculator",
    "ILocationDirectory",
    "LocationDirectory",
    "meters_to_feet",
]
