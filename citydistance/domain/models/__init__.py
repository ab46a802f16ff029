from .enums import StageKind, WorkflowStyle
from .place import Place
from .stage import AwaitingInput, Calculated, InputReceived, Located, Show, Stage

__all__ = [
    "AwaitingInput",
    "Calculated",
    "InputReceived",
    "Located",
    "Place",
    "Show",
    "Stage",
    "StageKind",
    "WorkflowStyle",
]
