from .gaze import AoiCount, GazeDistanceSample, GazeSample, RawRecord

__all__ = ["AoiCount", "GazeDistanceSample", "GazeSample", "RawRecord"]
