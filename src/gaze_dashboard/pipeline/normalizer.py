import logging
import math
import re
from typing import Optional

from gaze_dashboard.configs import ColumnMapping
from gaze_dashboard.models.gaze import GazeSample, RawRecord

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parses the leading base-10 integer of `value`.

    Leading whitespace is skipped and anything after the digits is ignored,
    so "12.7" gives 12. Only ASCII digits count. Returns None when there is
    no integer to read, or when it is too long for int() to convert.
    """
    if value is None:
        return None
    match = _INT_PREFIX.match(value.lstrip())
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        # sys.get_int_max_str_digits()
        return None


def parse_float(value: Optional[str]) -> float:
    """Parses the leading decimal literal of `value`, or returns nan."""
    if value is None:
        return math.nan
    match = _FLOAT_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    literal = match.group()
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


class SampleNormalizer:
    """
    Turns a raw record into a GazeSample.

    Coordinates are strict: a row whose x or y is not a finite number is
    rejected. Every other field is lenient and passed through as parsed.
    """

    def __init__(self, columns: Optional[ColumnMapping] = None):
        self._columns = columns or ColumnMapping()

    def normalize(self, record: RawRecord) -> Optional[GazeSample]:
        cols = self._columns

        x = parse_float(_lookup(record, cols.x))
        y = parse_float(_lookup(record, cols.y))
        if not (math.isfinite(x) and math.isfinite(y)):
            return None

        return GazeSample(
            timestamp=parse_int(_lookup(record, cols.timestamp)),
            participant=_lookup(record, cols.participant),
            x=x,
            y=y,
            fixation_duration=parse_int(_lookup(record, cols.fixation_duration)),
            aoi_name=_lookup(record, cols.aoi_name),
        )


def _lookup(record: RawRecord, aliases: list[str]) -> Optional[str]:
    for key in aliases:
        if key in record:
            return record[key]
    return None
