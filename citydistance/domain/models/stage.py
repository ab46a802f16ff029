"""
Stages a distance request passes through on its way to a rendered result.

Exactly one variant describes a request at any time. Transitions only move
forward: InputReceived -> Located -> Calculated -> Show. AwaitingInput is the
nominal initial state and has no outgoing transition.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.city import City
from ..value_objects.units import Feet, Meters
from .enums import StageKind
from .place import Place


class Stage(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    kind: ClassVar[StageKind]

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal()


class AwaitingInput(Stage):
    kind: ClassVar[StageKind] = StageKind.AWAITING_INPUT


class InputReceived(Stage):
    kind: ClassVar[StageKind] = StageKind.INPUT_RECEIVED

    start: City = Field(..., description="City the trip starts from.")
    dest: City = Field(..., description="City the trip ends at.")


class Located(Stage):
    kind: ClassVar[StageKind] = StageKind.LOCATED

    start: Place = Field(..., description="Directory entry for the start city.")
    dest: Place = Field(..., description="Directory entry for the destination.")


class Calculated(Stage):
    kind: ClassVar[StageKind] = StageKind.CALCULATED

    start: Place
    dest: Place
    distance: Meters | None = Field(
        default=None,
        ge=0.0,
        description="Great-circle distance in meters, absent if either place is unmapped.",
    )


class Show(Stage):
    kind: ClassVar[StageKind] = StageKind.SHOW

    start: Place
    dest: Place
    distance: Feet | None = Field(
        default=None,
        ge=0.0,
        description="Great-circle distance in feet, absent if either place is unmapped.",
    )
