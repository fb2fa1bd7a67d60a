import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from gaze_dashboard.models.gaze import GazeSample, RawRecord
from gaze_dashboard.utils.logging import ThrottledLogger
from .normalizer import SampleNormalizer

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class IngestionSuperseded(Exception):
    """Raised when a newer load has started while this transform was suspended."""


@dataclass
class SampleAccumulator:
    """
    Growing result of one transform run.

    `samples` is append-only: accepted samples are added in row order and
    never reordered or replaced.
    """
    total_rows: int = 0
    samples: list[GazeSample] = field(default_factory=list)
    rows_consumed: int = 0
    rows_rejected: int = 0

    @property
    def done(self) -> bool:
        return self.rows_consumed >= self.total_rows

    @property
    def progress(self) -> int:
        if self.total_rows == 0:
            return 100
        # Integer form of round-half-up(100 * consumed / total)
        return (200 * self.rows_consumed + self.total_rows) // (2 * self.total_rows)


class ChunkedTransformer:
    """
    Normalizes records in fixed-size increments.

    Between increments the transform awaits a zero-delay sleep so other tasks
    on the event loop (progress rendering, a newer load) get to run. No single
    step holds the loop for longer than one increment.
    """

    def __init__(self, normalizer: Optional[SampleNormalizer] = None, chunk_size: int = 100):
        """
        Args:
            normalizer: Converts raw records to samples. Defaults to the
                        standard export column names.
            chunk_size: Rows processed per increment before yielding.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer.")

        self._normalizer = normalizer or SampleNormalizer()
        self._chunk_size = chunk_size
        self._reject_logger = ThrottledLogger(logger, interval_sec=1)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def process_increment(self, records: Sequence[RawRecord], acc: SampleAccumulator) -> int:
        """
        Runs the next increment against `acc` and returns the new progress.
        """
        start = acc.rows_consumed
        end = min(start + self._chunk_size, acc.total_rows)

        accepted = []
        for record in records[start:end]:
            sample = self._normalizer.normalize(record)
            if sample is not None:
                accepted.append(sample)

        rejected = (end - start) - len(accepted)
        acc.samples.extend(accepted)
        acc.rows_consumed = end
        acc.rows_rejected += rejected

        if rejected:
            self._reject_logger.warning(
                "rows dropped for unplottable coordinates.", count=rejected
            )
        return acc.progress

    async def transform(
        self,
        records: Sequence[RawRecord],
        accumulator: Optional[SampleAccumulator] = None,
        on_progress: Optional[ProgressCallback] = None,
        is_stale: Optional[Callable[[], bool]] = None,
    ) -> SampleAccumulator:
        """
        Normalizes all records, yielding to the event loop between increments.

        Args:
            records: Decoded rows in file order.
            accumulator: Receives the samples. A fresh one is created if omitted.
            on_progress: Called with the percentage after every increment.
            is_stale: Checked after every yield. When it returns True the run
                      stops with IngestionSuperseded.

        Returns:
            The accumulator holding the accepted samples.
        """
        acc = accumulator or SampleAccumulator()
        acc.total_rows = len(records)

        if acc.total_rows == 0:
            if on_progress:
                on_progress(100)
            return acc

        logger.debug(
            f"Transforming {acc.total_rows} rows in increments of {self._chunk_size}."
        )
        while True:
            progress = self.process_increment(records, acc)
            if on_progress:
                on_progress(progress)

            if acc.done:
                break

            await asyncio.sleep(0)
            if is_stale is not None and is_stale():
                raise IngestionSuperseded(
                    f"Abandoned after {acc.rows_consumed} of {acc.total_rows} rows."
                )

        if acc.rows_rejected:
            logger.info(f"{acc.rows_rejected} of {acc.total_rows} rows had no usable coordinates.")
        return acc
