from enum import Enum, auto


class IngestionState(Enum):
    """
    Lifecycle of the currently selected file.

    Presentation layers use it to decide which progress indicator to show.
    """
    IDLE = auto()  # No file selected yet.
    READING = auto()  # File bytes are being read and decoded.
    TRANSFORMING = auto()  # Rows are being normalized increment by increment.
    COMPLETE = auto()  # Samples and derived metrics are available.
    FAILED = auto()  # The read failed or timed out.
