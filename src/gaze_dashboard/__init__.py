from .core import IngestionController, IngestionState, IngestionView
from .models import AoiCount, GazeDistanceSample, GazeSample

__all__ = [
    "AoiCount",
    "GazeDistanceSample",
    "GazeSample",
    "IngestionController",
    "IngestionState",
    "IngestionView",
]
