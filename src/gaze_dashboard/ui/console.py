import logging

from ..pipeline.metrics import DerivedMetrics

logger = logging.getLogger(__name__)


class ConsoleView:
    """
    IngestionView that reports through logging.

    Progress is logged each time it crosses a multiple of `step` percent,
    so a long transform produces a handful of lines rather than hundreds.
    """

    def __init__(self, step: int = 10, top_aois: int = 10):
        if not 0 < step <= 100:
            raise ValueError("step must be between 1 and 100.")
        self._step = step
        self._top_aois = top_aois
        self._last_read = -1
        self._last_transform = -1

    def show_read_progress(self, percent: int) -> None:
        if self._crossed(self._last_read, percent):
            logger.info(f"Loading file: {percent}%")
        self._last_read = percent

    def show_transform_progress(self, percent: int) -> None:
        if self._crossed(self._last_transform, percent):
            logger.info(f"Processing data: {percent}%")
        self._last_transform = percent

    def show_results(self, metrics: DerivedMetrics) -> None:
        # A new load restarts both progress streams.
        self._last_read = self._last_transform = -1

        samples = metrics.samples
        logger.info(f"Samples: {len(samples)}")
        if metrics.distances:
            longest = max(metrics.distances, key=lambda d: d.distance)
            logger.info(
                f"Gaze distances: {len(metrics.distances)} "
                f"(max {longest.distance} at t={longest.timestamp})"
            )
        for bar in metrics.aoi_data()[:self._top_aois]:
            logger.info(f"AOI {bar.name!r}: {bar.value}")

    def show_error(self, message: str) -> None:
        self._last_read = self._last_transform = -1
        logger.error(message)

    def _crossed(self, last: int, percent: int) -> bool:
        # A drop means a new load restarted the stream.
        return last < 0 or percent < last or percent // self._step > last // self._step
