from pathlib import Path
from typing import Optional

from .acquisition import DummySource, FileSource, TextSource
from .configs import AppSettings

def create_source(
    settings: AppSettings,
    path: Optional[Path] = None,
    dummy: bool = False,
) -> TextSource:
    """
    Creates the text source for one load, either the export at `path` or a
    synthetic one.
    """
    if dummy:
        return DummySource(
            num_samples=settings.dummy.num_samples,
            invalid_every=settings.dummy.invalid_every,
        )

    if path is None:
        raise ValueError("A file path is required unless dummy mode is used.")

    return FileSource(
        path,
        encoding=settings.ingestion.encoding,
        block_size=settings.ingestion.read_block_size,
    )
