from enum import Enum


class StageKind(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    INPUT_RECEIVED = "input_received"
    LOCATED = "located"
    CALCULATED = "calculated"
    SHOW = "show"

    def __str__(self) -> str:
        return self.value

    def is_terminal(self) -> bool:
        return self is StageKind.SHOW


class WorkflowStyle(str, Enum):
    COMPOSED = "composed"
    STAGED = "staged"

    def __str__(self) -> str:
        return self.value
