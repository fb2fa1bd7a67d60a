from .base import TextSource
from .dummy import DummySource
from .file import FileSource
from .memory import MemorySource

__all__ = ["TextSource", "DummySource", "FileSource", "MemorySource"]
