"""
The request pipeline written as an explicit state machine.

advance() is a pure reducer from one Stage to the next. A request enters at
InputReceived and is advanced until it reaches the terminal Show stage, which
is then rendered.
"""

from collections.abc import Iterator

from citydistance.domain.exceptions import PipelineError
from citydistance.domain.models import (
    AwaitingInput,
    Calculated,
    InputReceived,
    Located,
    Show,
    Stage,
)
from citydistance.domain.services import (
    IDistanceCalculator,
    ILocationDirectory,
    meters_to_feet,
)
from citydistance.domain.value_objects import City, Feet
from citydistance.services.interfaces import IDistanceWorkflow, IResultRenderer

from .functional import map_optional


class StagedWorkflow(IDistanceWorkflow):
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

    def advance(self, stage: Stage) -> Stage:
        """
        Compute the stage that follows the given one.

        Raises:
            NotFoundError: If InputReceived names a city missing from the directory.
            PipelineError: If the stage has no outgoing transition
                (AwaitingInput or the terminal Show).
        """
        match stage:
            case InputReceived(start=start, dest=dest):
                located_start, located_dest = self._directory.lookup_pair(start, dest)
                return Located(start=located_start, dest=located_dest)
            case Located(start=start, dest=dest):
                distance = self._calculator.try_distance(start, dest)
                return Calculated(start=start, dest=dest, distance=distance)
            case Calculated(start=start, dest=dest, distance=distance):
                feet = map_optional(meters_to_feet)(distance)
                return Show(start=start, dest=dest, distance=feet)
            case AwaitingInput():
                self._logger.error("Cannot advance a request that has no input")
                raise PipelineError("Cannot advance a request that has no input")
            case Show():
                self._logger.error("Show is a terminal stage")
                raise PipelineError("Show is a terminal stage")
            case _:
                self._logger.error(f"Unknown stage: {type(stage).__name__}")
                raise PipelineError(f"Unknown stage: {type(stage).__name__}")

    def iterate(self, stage: Stage) -> Iterator[Stage]:
        """Yield the given stage and every following one up to the terminal stage."""
        yield stage
        while not stage.is_terminal:
            stage = self.advance(stage)
            self._logger.debug(f"Advanced to stage {stage.kind}")
            yield stage

    def run_to_completion(self, stage: Stage) -> Show:
        final = stage
        for final in self.iterate(stage):
            pass
        if not isinstance(final, Show):
            raise PipelineError(f"Request ended in non-terminal stage {final.kind}")
        return final

    def run_from(self, stage: Stage) -> str:
        show = self.run_to_completion(stage)
        return self._renderer.render(show.start, show.dest, show.distance)

    def find_distance(self, start: City, dest: City) -> Feet | None:
        return self.run_to_completion(InputReceived(start=start, dest=dest)).distance

    def run(self, start: City, dest: City) -> str:
        self._logger.info(f"Processing request {start} -> {dest}")
        return self.run_from(InputReceived(start=start, dest=dest))
