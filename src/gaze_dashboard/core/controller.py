import asyncio
import logging
from typing import Optional

from ..acquisition import TextSource
from ..configs import AppSettings
from ..models import AoiCount, GazeDistanceSample, GazeSample
from ..pipeline import (
    ChunkedTransformer,
    DerivedMetrics,
    IngestionSuperseded,
    SampleAccumulator,
    SampleNormalizer,
    decode_records,
    derive_metrics,
    compute_aoi_histogram,
    aoi_bars,
)
from .protocols import IngestionView
from .state import IngestionState

logger = logging.getLogger(__name__)


class IngestionController:
    """
    The headless core of the dashboard.

    Owns the sample sequence, the derived distance series and both progress
    counters for the currently selected file. Every new load starts a new
    generation: state from the previous file is discarded, and a transform
    still running for an older generation stops at its next yield without
    writing anything.
    """

    def __init__(self, settings: AppSettings, view: Optional[IngestionView] = None):
        self.settings = settings
        self.view = view

        self.state: IngestionState = IngestionState.IDLE
        self.source_name: Optional[str] = None
        self.read_progress: int = 0
        self.transform_progress: int = 0

        self._generation = 0
        self._acc = SampleAccumulator()
        self._distances: list[GazeDistanceSample] = []

    # --- Read-only snapshots ---

    @property
    def samples(self) -> tuple[GazeSample, ...]:
        return tuple(self._acc.samples)

    @property
    def distances(self) -> tuple[GazeDistanceSample, ...]:
        return tuple(self._distances)

    @property
    def rows_rejected(self) -> int:
        return self._acc.rows_rejected

    @property
    def generation(self) -> int:
        return self._generation

    def aoi_histogram(self) -> dict[Optional[str], int]:
        return compute_aoi_histogram(self._acc.samples)

    def aoi_data(self) -> list[AoiCount]:
        return aoi_bars(self.aoi_histogram())

    # --- Actions ---

    async def ingest(self, source: TextSource) -> list[GazeSample]:
        """
        Phase 1: read, decode and transform one source.

        Resets all outputs before reading. Raises IngestionSuperseded if
        another ingest starts before this one finishes, OSError for read
        failures and TimeoutError when the configured read timeout expires.
        """
        return await self._ingest(source, self._begin(source))

    async def _ingest(self, source: TextSource, generation: int) -> list[GazeSample]:
        def is_stale() -> bool:
            return generation != self._generation

        cfg = self.settings.ingestion

        read = source.read(lambda p: self._on_read_progress(generation, p))
        if cfg.read_timeout_s is not None:
            text = await asyncio.wait_for(read, timeout=cfg.read_timeout_s)
        else:
            text = await read

        if is_stale():
            raise IngestionSuperseded(f"Read of {source.name} finished after a newer load started.")

        records = decode_records(text)
        logger.info(f"Decoded {len(records)} rows from {source.name}")

        self.state = IngestionState.TRANSFORMING
        acc = SampleAccumulator()
        self._acc = acc
        transformer = ChunkedTransformer(
            SampleNormalizer(self.settings.columns),
            chunk_size=cfg.chunk_size,
        )
        await transformer.transform(
            records,
            accumulator=acc,
            on_progress=lambda p: self._on_transform_progress(generation, p),
            is_stale=is_stale,
        )
        return list(acc.samples)

    def derive_metrics(self) -> DerivedMetrics:
        """
        Phase 2: compute the distance series for the current sample sequence
        and store it, so samples, distances and the AOI histogram always
        describe the same data.
        """
        metrics = derive_metrics(self._acc.samples)
        self._distances = list(metrics.distances)
        self.state = IngestionState.COMPLETE
        return metrics

    async def load(self, source: TextSource) -> bool:
        """
        Runs both phases for a newly selected source and notifies the view.
        Returns: True if the source was fully ingested.
        """
        generation = self._begin(source)
        try:
            await self._ingest(source, generation)
        except IngestionSuperseded as e:
            logger.info(f"Load of {source.name} superseded: {e}")
            return False
        except Exception as e:
            if generation != self._generation:
                logger.info(f"Ignoring failure of superseded load {source.name}: {e!r}")
                return False
            logger.exception(f"Failed to load {source.name}")
            self.state = IngestionState.FAILED
            if self.view:
                self.view.show_error(f"Failed to load {source.name}: {str(e) or type(e).__name__}")
            return False

        metrics = self.derive_metrics()
        logger.info(
            f"Loaded {len(metrics.samples)} samples from {source.name} "
            f"({self.rows_rejected} rows rejected, {len(metrics.distances)} distances)."
        )
        if self.view:
            self.view.show_results(metrics)
        return True

    # --- Internals ---

    def _begin(self, source: TextSource) -> int:
        self._generation += 1
        self.source_name = source.name
        self.state = IngestionState.READING
        self.read_progress = 0
        self.transform_progress = 0
        self._acc = SampleAccumulator()
        self._distances = []
        logger.info(f"Starting load #{self._generation}: {source.name}")
        return self._generation

    def _on_read_progress(self, generation: int, percent: int) -> None:
        if generation != self._generation:
            return
        self.read_progress = percent
        if self.view:
            self.view.show_read_progress(percent)

    def _on_transform_progress(self, generation: int, percent: int) -> None:
        if generation != self._generation:
            return
        self.transform_progress = percent
        if self.view:
            self.view.show_transform_progress(percent)
