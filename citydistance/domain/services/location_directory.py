from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from loguru import logger

from citydistance.utils.config.config_models import DirectoryConfig

from ..exceptions import NotFoundError
from ..models.place import Place
from ..value_objects.city import City
from ..value_objects.location import Location
from ..value_objects.units import degrees_latitude, degrees_longitude


class ILocationDirectory(ABC):

    @abstractmethod
    def lookup(self, city: City) -> Place:
        """
        find the directory entry for a city

        Args:
            city (City): city to look up

        Returns:
            Place: the first entry whose name equals city

        Raises:
            NotFoundError: if no entry matches
        """

    @abstractmethod
    def lookup_pair(self, start: City, dest: City) -> tuple[Place, Place]:
        """
        look up both cities of a request

        Raises:
            NotFoundError: for the first city without an entry
        """


class LocationDirectory(ILocationDirectory):
    def __init__(self, places: Iterable[Place]) -> None:
        self._places: tuple[Place, ...] = tuple(places)
        self._logger = logger.bind(service=self.__class__.__name__)

    @classmethod
    def from_config(cls, config: DirectoryConfig) -> "LocationDirectory":
        """
        Build the directory from configured seed entries.

        Every entry passes through City.create and Location.create, so a bad
        seed entry fails with the same ValidationError a caller would get.
        """
        places = []
        for entry in config.places:
            location = None
            if entry.latitude is not None and entry.longitude is not None:
                location = Location.create(
                    degrees_latitude(entry.latitude),
                    degrees_longitude(entry.longitude),
                )
            places.append(Place(name=City.create(entry.name), location=location))
        return cls(places)

    @property
    def cities(self) -> tuple[City, ...]:
        return tuple(place.name for place in self._places)

    def _find(self, city: City) -> Place | None:
        for place in self._places:
            if place.name == city:
                self._logger.debug(f"Found {city} in directory")
                return place
        return None

    def lookup(self, city: City) -> Place:
        place = self._find(city)
        if place is None:
            self._logger.error(f"City not found in directory: {city}")
            raise NotFoundError(city.name)
        return place

    def lookup_pair(self, start: City, dest: City) -> tuple[Place, Place]:
        start_place, dest_place = self._find(start), self._find(dest)
        if start_place is None or dest_place is None:
            missing = tuple(
                city.name
                for city, place in ((start, start_place), (dest, dest_place))
                if place is None
            )
            self._logger.error(f"Cities not found in directory: {', '.join(missing)}")
            raise NotFoundError(missing[0], missing=missing)
        return start_place, dest_place

    def __len__(self) -> int:
        return len(self._places)

    def __iter__(self) -> Iterator[Place]:
        return iter(self._places)

    def __contains__(self, city: object) -> bool:
        return any(place.name == city for place in self._places)
