import logging
import math

from .memory import MemorySource

logger = logging.getLogger(__name__)


class DummySource(MemorySource):
    """
    A TextSource that synthesizes a gaze export for development and testing.

    The gaze point follows a circular path sampled at a fixed frequency, AOI
    names cycle through a fixed list, and every `invalid_every`-th row carries
    an unparseable X coordinate so the rejection path is exercised too.
    """

    HEADER = [
        "Recording.timestamp",
        "Participant.name",
        "Gaze.point.X",
        "Gaze.point.Y",
        "Gaze.event.duration",
        "AOI.name",
    ]
    AOI_NAMES = ("Header", "Sidebar", "Content", "Footer")

    def __init__(
        self,
        num_samples: int = 5_000,
        *,
        invalid_every: int = 50,
        frequency: int = 120,
        radius: float = 200.0,
        center: tuple[float, float] = (960.0, 540.0),
        speed: float = 0.5,
        participant: str = "dummy",
    ):
        """
        Args:
            num_samples: Number of data rows to generate.
            invalid_every: Every n-th row gets a non-numeric X. 0 disables.
            frequency: Sampling frequency in Hz, sets the timestamp spacing.
            radius: Radius of the circular gaze path in pixels.
            center: The (x, y) center of the circular path in pixels.
            speed: Revolutions per second along the circle.
            participant: Value written to the participant column.
        """
        if num_samples < 0:
            raise ValueError("num_samples must not be negative.")
        if frequency <= 0:
            raise ValueError("Frequency must be positive.")

        self.num_samples = num_samples
        self.invalid_every = invalid_every
        self._interval_ms = 1000 / frequency
        self._radius = radius
        self._center_x, self._center_y = center
        self._speed = speed
        self._participant = participant

        super().__init__(self._generate(), name=f"<dummy:{num_samples}>")
        logger.info(f"DummySource generated {num_samples} rows at {frequency} Hz.")

    def _generate(self) -> str:
        lines = [",".join(self.HEADER)]
        for i in range(self.num_samples):
            t_ms = round(i * self._interval_ms)
            angle = (t_ms / 1000) * self._speed * 2 * math.pi
            gaze_x = self._center_x + self._radius * math.cos(angle)
            gaze_y = self._center_y + self._radius * math.sin(angle)

            x_field = f"{gaze_x:.1f}"
            if self.invalid_every and (i + 1) % self.invalid_every == 0:
                x_field = "NA"

            lines.append(",".join([
                str(t_ms),
                self._participant,
                x_field,
                f"{gaze_y:.1f}",
                str(100 + (i % 10) * 25),
                self.AOI_NAMES[(i // 30) % len(self.AOI_NAMES)],
            ]))
        return "\n".join(lines)
