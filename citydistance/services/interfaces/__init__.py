from .i_distance_workflow import IDistanceWorkflow
from .i_result_renderer import IResultRenderer

__all__ = [
    "IDistanceWorkflow",
    "IResultRenderer",
]
