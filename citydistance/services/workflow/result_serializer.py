import json

from citydistance.domain.models import Place
from citydistance.domain.value_objects import Feet
from citydistance.services.interfaces import IResultRenderer


class ResultSerializer(IResultRenderer):
    """
    Serialize a request outcome as a single-line JSON record.

    Field order is start, dest, distance. The distance field is left out when
    there is no distance, and a place without coordinates is written with its
    name only. Floats use fixed-point notation.
    """

    def __init__(self, decimal_places: int = 6):
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")
        self._decimal_places = decimal_places

    def _number(self, value: float) -> str:
        return f"{value:.{self._decimal_places}f}"

    def serialize_place(self, place: Place) -> str:
        name = json.dumps(place.name.name, ensure_ascii=False)
        if place.location is None:
            return f'{{"name":{name}}}'
        return (
            f'{{"name":{name},"location":{{'
            f'"latitude":{self._number(place.location.latitude)},'
            f'"longitude":{self._number(place.location.longitude)}}}}}'
        )

    def render(self, start: Place, dest: Place, distance: Feet | None) -> str:
        start_text = self.serialize_place(start)
        dest_text = self.serialize_place(dest)
        if distance is None:
            return f'{{"start":{start_text},"dest":{dest_text}}}'
        return (
            f'{{"start":{start_text},"dest":{dest_text},'
            f'"distance":{self._number(distance)}}}'
        )
