from .composed_workflow import ComposedWorkflow
from .functional import compose, map_optional, spread
from .result_serializer import ResultSerializer
from .staged_workflow import StagedWorkflow

__all__ = [
    "ComposedWorkflow",
    "ResultSerializer",
    "StagedWorkflow",
    "compose",
    "map_optional",
    "spread",
]
