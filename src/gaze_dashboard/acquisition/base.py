from abc import ABC, abstractmethod
from typing import Callable, Optional

ProgressCallback = Callable[[int], None]


class TextSource(ABC):
    """
    Abstract Base Class for all export text sources.

    A TextSource delivers the complete text of one gaze export. Read progress
    may be reported while the read is underway, but the text only becomes
    available once the whole input has been read and decoded.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the input, used in logs."""
        ...

    @abstractmethod
    async def read(self, on_progress: Optional[ProgressCallback] = None) -> str:
        """
        Reads and decodes the whole input.

        Args:
            on_progress: Called with the percentage (0-100) of input read.
                         The last call always reports 100.
        """
        raise NotImplementedError
