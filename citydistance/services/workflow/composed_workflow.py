"""
The request pipeline written as one straight-line function composition.

    lookup_pair >> try_distance >> map_optional(meters_to_feet)

Optionality flows through as a value; there is no branching at the call site.
"""

from citydistance.domain.models import Place
from citydistance.domain.services import (
    IDistanceCalculator,
    ILocationDirectory,
    meters_to_feet,
)
from citydistance.domain.value_objects import City, Feet, Meters
from citydistance.services.interfaces import IDistanceWorkflow, IResultRenderer

from .functional import compose, map_optional, spread


class ComposedWorkflow(IDistanceWorkflow):
    def __init__(
        self,
        directory: ILocationDirectory,
        calculator: IDistanceCalculator,
        renderer: IResultRenderer,
    ):
        super().__init__()
        self._directory = directory
        self._calculator = calculator
        self._renderer = renderer

        self._distance_pipeline = compose(
            spread(directory.lookup_pair),
            spread(calculator.try_distance),
            map_optional(meters_to_feet),
        )
        self._render_pipeline = compose(
            spread(directory.lookup_pair),
            spread(self._with_distance),
            spread(self._with_distance_in_feet),
            spread(renderer.render),
        )

    def _with_distance(
        self, start: Place, dest: Place
    ) -> tuple[Place, Place, Meters | None]:
        return start, dest, self._calculator.try_distance(start, dest)

    @staticmethod
    def _with_distance_in_feet(
        start: Place, dest: Place, distance: Meters | None
    ) -> tuple[Place, Place, Feet | None]:
        return start, dest, map_optional(meters_to_feet)(distance)

    def find_distance(self, start: City, dest: City) -> Feet | None:
        return self._distance_pipeline((start, dest))

    def run(self, start: City, dest: City) -> str:
        self._logger.info(f"Processing request {start} -> {dest}")
        return self._render_pipeline((start, dest))
