from abc import ABC, abstractmethod

from loguru import logger

from citydistance.domain.value_objects import City, Feet


class IDistanceWorkflow(ABC):
    def __init__(self):
        self._logger = logger.bind(service=self.__class__.__name__)

    @abstractmethod
    def find_distance(self, start: City, dest: City) -> Feet | None:
        """
        Distance in feet between two cities.

        Args:
            start (City): The start city.
            dest (City): The destination city.

        Returns:
            Feet | None: None when either city has no known location.

        Raises:
            NotFoundError: If either city is missing from the directory.
        """
        pass

    @abstractmethod
    def run(self, start: City, dest: City) -> str:
        """
        Process one request end to end and render the result.

        Raises:
            NotFoundError: If either city is missing from the directory.
        """
        pass
