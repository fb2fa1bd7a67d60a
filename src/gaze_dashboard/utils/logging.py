import time
import logging
from typing import Callable


class ThrottledLogger:
    """
    Rate-limits a repeated warning.

    Occurrences between two emitted records are summed and reported as the
    leading `[n]` of the next record.
    """

    def __init__(
        self,
        logger: logging.Logger,
        interval_sec: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._interval = interval_sec
        self._clock = clock
        self._last_log_time: float | None = None
        self._counter = 0

    @property
    def pending(self) -> int:
        """Occurrences counted since the last emitted record."""
        return self._counter

    def warning(self, message: str, *args, count: int = 1, **kwargs) -> bool:
        self._counter += count
        now = self._clock()

        if self._last_log_time is None or now - self._last_log_time >= self._interval:
            self._logger.warning("[%d] " + message, self._counter, *args, **kwargs)
            self._last_log_time = now
            self._counter = 0
            return True
        return False
