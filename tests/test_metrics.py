import math
import random

import pytest

from gaze_dashboard.models import AoiCount, GazeDistanceSample, GazeSample
from gaze_dashboard.pipeline import (
    aoi_bars,
    compute_aoi_histogram,
    compute_distances,
    derive_metrics,
    round_half_up,
)


def _sample(x, y, timestamp=0, aoi=None):
    return GazeSample(
        timestamp=timestamp, participant="P", x=x, y=y, fixation_duration=0, aoi_name=aoi
    )


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (-0.5, 0), (-1.5, -1), (7.0, 7)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_distance_of_3_4_5_triangle():
    distances = compute_distances([_sample(0, 0, 10), _sample(3, 4, 20)])
    assert distances == [GazeDistanceSample(timestamp=20, distance=5)]


def test_distances_empty_below_two_samples():
    assert compute_distances([]) == []
    assert compute_distances([_sample(1, 1)]) == []


def test_distance_rounds_half_up():
    # sqrt(0.25 + 0) = 0.5 -> 1
    assert compute_distances([_sample(0, 0), _sample(0.5, 0)])[0].distance == 1


def test_distance_timestamp_may_be_missing():
    distances = compute_distances([_sample(0, 0, 1), _sample(1, 0, None)])
    assert distances[0].timestamp is None


def test_distances_length_and_idempotence():
    rng = random.Random(7)
    samples = [_sample(rng.uniform(0, 1920), rng.uniform(0, 1080), i) for i in range(200)]

    first = compute_distances(samples)
    assert len(first) == len(samples) - 1
    assert compute_distances(samples) == first
    for prev, curr, d in zip(samples, samples[1:], first):
        assert d.timestamp == curr.timestamp
        dx, dy = curr.x - prev.x, curr.y - prev.y
        assert d.distance == math.floor(math.sqrt(dx * dx + dy * dy) + 0.5)


def test_aoi_histogram_first_occurrence_order():
    samples = [_sample(0, 0, aoi=a) for a in ["A", "B", "A"]]
    histogram = compute_aoi_histogram(samples)
    assert histogram == {"A": 2, "B": 1}
    assert list(histogram) == ["A", "B"]


def test_aoi_histogram_keeps_empty_and_missing_names():
    samples = [_sample(0, 0, aoi=a) for a in ["", None, "", "C"]]
    assert compute_aoi_histogram(samples) == {"": 2, None: 1, "C": 1}


def test_aoi_histogram_empty():
    assert compute_aoi_histogram([]) == {}


def test_aoi_bars():
    assert aoi_bars({"A": 2, "B": 1}) == [AoiCount("A", 2), AoiCount("B", 1)]


def test_derive_metrics_snapshots_samples():
    samples = [_sample(0, 0, 1, "A"), _sample(3, 4, 2, "A")]
    metrics = derive_metrics(samples)
    samples.append(_sample(9, 9, 3, "B"))

    assert len(metrics.samples) == 2
    assert metrics.distances == [GazeDistanceSample(2, 5)]
    assert metrics.aoi_histogram() == {"A": 2}
    assert metrics.aoi_data() == [AoiCount("A", 2)]
