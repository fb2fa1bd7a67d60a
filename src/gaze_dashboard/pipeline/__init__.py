from .decoder import decode_records
from .metrics import (
    DerivedMetrics,
    aoi_bars,
    compute_aoi_histogram,
    compute_distances,
    derive_metrics,
    round_half_up,
)
from .normalizer import SampleNormalizer, parse_float, parse_int
from .transformer import ChunkedTransformer, IngestionSuperseded, SampleAccumulator

__all__ = [
    "ChunkedTransformer",
    "DerivedMetrics",
    "IngestionSuperseded",
    "SampleAccumulator",
    "SampleNormalizer",
    "aoi_bars",
    "compute_aoi_histogram",
    "compute_distances",
    "decode_records",
    "derive_metrics",
    "parse_float",
    "parse_int",
    "round_half_up",
]
