from dataclasses import dataclass
from typing import Optional

# One decoded row: header name -> raw field text. Short rows omit trailing keys.
RawRecord = dict[str, str]


@dataclass(slots=True, frozen=True)
class GazeSample:
    """
    A normalized, immutable gaze measurement.

    `x` and `y` are always finite. The remaining fields are carried through
    as parsed: `None` stands for a value that was missing or not a number.
    """
    timestamp: Optional[int]
    participant: Optional[str]
    x: float
    y: float
    fixation_duration: Optional[int]
    aoi_name: Optional[str]


@dataclass(slots=True, frozen=True)
class GazeDistanceSample:
    """Distance between two consecutive samples, stamped with the later one."""
    timestamp: Optional[int]
    distance: int


@dataclass(slots=True, frozen=True)
class AoiCount:
    name: Optional[str]
    value: int
