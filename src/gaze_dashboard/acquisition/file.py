import asyncio
import logging
from pathlib import Path
from typing import Optional

from .base import ProgressCallback, TextSource

logger = logging.getLogger(__name__)


class FileSource(TextSource):
    """
    Reads a gaze export from disk.

    Blocks are read in a worker thread so the event loop stays responsive.
    Bytes that cannot be decoded are replaced rather than failing the load.
    """

    def __init__(
        self,
        path: Path,
        encoding: str = "utf-8-sig",
        block_size: int = 1024 * 1024,
    ) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be a positive integer.")

        self.path = Path(path)
        self.encoding = encoding
        self.block_size = block_size

        if self.path.suffix.lower() != ".csv":
            logger.warning(f"'{self.path.name}' does not have a .csv suffix; reading it anyway.")

    @property
    def name(self) -> str:
        return self.path.name

    async def read(self, on_progress: Optional[ProgressCallback] = None) -> str:
        total = (await asyncio.to_thread(self.path.stat)).st_size
        logger.info(f"Reading {self.path} ({total:,} bytes)")

        blocks: list[bytes] = []
        loaded = 0
        fh = await asyncio.to_thread(self.path.open, "rb")
        try:
            while True:
                block = await asyncio.to_thread(fh.read, self.block_size)
                if not block:
                    break
                blocks.append(block)
                loaded += len(block)
                if on_progress and total:
                    on_progress(min(100, (200 * loaded + total) // (2 * total)))
        finally:
            await asyncio.to_thread(fh.close)

        if on_progress:
            on_progress(100)

        return b"".join(blocks).decode(self.encoding, errors="replace")
