from abc import ABC, abstractmethod

from citydistance.domain.models import Place
from citydistance.domain.value_objects import Feet


class IResultRenderer(ABC):
    @abstractmethod
    def render(self, start: Place, dest: Place, distance: Feet | None) -> str:
        """
        Render the outcome of a distance request.

        Args:
            start (Place): The start place.
            dest (Place): The destination place.
            distance (Feet | None): Distance in feet, None when either place
                has no known location.

        Returns:
            str: The rendered record.
        """
        pass
