from .app import AppSettings, ColumnMapping, DummySourceSettings, IngestionSettings
from .utils import LoggingConfig

__all__ = [
    "AppSettings",
    "ColumnMapping",
    "DummySourceSettings",
    "IngestionSettings",
    "LoggingConfig",
]
