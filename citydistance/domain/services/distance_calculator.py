import math
from abc import ABC, abstractmethod

from loguru import logger

from ..models.place import Place
from ..value_objects.location import Location
from ..value_objects.units import METERS_PER_FOOT, Feet, Meters, Radians

# https://en.wikipedia.org/wiki/Earth_radius#Mean_radius
EARTH_MEAN_RADIUS_M = Meters(6371008.8)


def degrees_to_radians(value: float) -> Radians:
    return Radians(value * (math.pi / 180.0))


def haversine(theta: Radians) -> float:
    return 0.5 * (1.0 - math.cos(theta))


def meters_to_feet(distance: Meters) -> Feet:
    return Feet(distance / METERS_PER_FOOT)


class IDistanceCalculator(ABC):

    @abstractmethod
    def great_circle_distance(self, start: Location, dest: Location) -> Meters:
        """
        great-circle distance between two locations

        Args:
            start (Location): first location
            dest (Location): second location

        Returns:
            Meters: non-negative distance, symmetric in its arguments
        """

    @abstractmethod
    def try_distance(self, start: Place, dest: Place) -> Meters | None:
        """
        distance between two places when both have a known location

        Args:
            start (Place): first place
            dest (Place): second place

        Returns:
            Meters | None: None if either place has no location
        """


class DistanceCalculator(IDistanceCalculator):
    def __init__(self, earth_radius: Meters = EARTH_MEAN_RADIUS_M) -> None:
        if earth_radius <= 0:
            raise ValueError(f"Earth radius must be positive, got {earth_radius}")
        self._earth_radius = earth_radius
        self._logger = logger.bind(service=self.__class__.__name__)

    @property
    def earth_radius(self) -> Meters:
        return self._earth_radius

    def great_circle_distance(self, start: Location, dest: Location) -> Meters:
        phi_a = degrees_to_radians(start.latitude)
        phi_b = degrees_to_radians(dest.latitude)
        psi_a = degrees_to_radians(start.longitude)
        psi_b = degrees_to_radians(dest.longitude)

        h = haversine(Radians(phi_b - phi_a)) + haversine(Radians(psi_b - psi_a)) * (
            math.cos(phi_a) * math.cos(phi_b)
        )
        # rounding can push h past 1 for antipodal points
        h = min(h, 1.0)
        return Meters(2.0 * self._earth_radius * math.asin(math.sqrt(h)))

    def try_distance(self, start: Place, dest: Place) -> Meters | None:
        if start.location is None or dest.location is None:
            self._logger.debug(
                f"No distance between {start.name} and {dest.name}: location unknown"
            )
            return None

        distance = self.great_circle_distance(start.location, dest.location)
        self._logger.debug(f"Distance {start.name} -> {dest.name}: {distance:.1f} m")
        return distance
