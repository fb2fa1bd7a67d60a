from typing import Optional

from .base import ProgressCallback, TextSource


class MemorySource(TextSource):
    """A TextSource over text that is already in memory."""

    def __init__(self, text: str, name: str = "<memory>") -> None:
        self._text = text
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def read(self, on_progress: Optional[ProgressCallback] = None) -> str:
        if on_progress:
            on_progress(100)
        return self._text
