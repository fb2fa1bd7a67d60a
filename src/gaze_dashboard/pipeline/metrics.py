import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from gaze_dashboard.models.gaze import AoiCount, GazeDistanceSample, GazeSample


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def compute_distances(samples: Sequence[GazeSample]) -> list[GazeDistanceSample]:
    """
    Euclidean distance between each pair of consecutive samples.

    Returns one entry per pair (empty for fewer than two samples), stamped with
    the timestamp of the later sample and rounded to whole units.
    """
    distances: list[GazeDistanceSample] = []
    for prev, curr in zip(samples, samples[1:]):
        dx = curr.x - prev.x
        dy = curr.y - prev.y
        distances.append(
            GazeDistanceSample(
                timestamp=curr.timestamp,
                distance=round_half_up(math.sqrt(dx * dx + dy * dy)),
            )
        )
    return distances


def compute_aoi_histogram(samples: Sequence[GazeSample]) -> dict[Optional[str], int]:
    """Counts samples per AOI name, keyed in first-occurrence order."""
    counts: dict[Optional[str], int] = {}
    for sample in samples:
        counts[sample.aoi_name] = counts.get(sample.aoi_name, 0) + 1
    return counts


def aoi_bars(histogram: dict[Optional[str], int]) -> list[AoiCount]:
    return [AoiCount(name=name, value=value) for name, value in histogram.items()]


@dataclass(frozen=True)
class DerivedMetrics:
    """Metrics derived from one completed sample sequence."""
    samples: tuple[GazeSample, ...]
    distances: list[GazeDistanceSample] = field(default_factory=list)

    def aoi_histogram(self) -> dict[Optional[str], int]:
        # Recomputed per call; only rendering asks for it.
        return compute_aoi_histogram(self.samples)

    def aoi_data(self) -> list[AoiCount]:
        return aoi_bars(self.aoi_histogram())


def derive_metrics(samples: Sequence[GazeSample]) -> DerivedMetrics:
    snapshot = tuple(samples)
    return DerivedMetrics(samples=snapshot, distances=compute_distances(snapshot))
