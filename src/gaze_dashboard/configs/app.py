import codecs
import logging
from importlib.metadata import version
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, PositiveFloat, PositiveInt, Field, field_validator

from .utils import LoggingConfig

logger = logging.getLogger(__name__)

class IngestionSettings(BaseModel):
    """Tuning for file reading and the chunked transform."""
    chunk_size: PositiveInt = Field(100, description="Rows normalized per increment before yielding to the event loop.")
    read_block_size: PositiveInt = Field(1024 * 1024, description="Bytes read per block; read progress is reported per block.")
    encoding: str = Field("utf-8-sig", description="Text encoding of the export. The -sig variant drops a leading BOM.")
    read_timeout_s: Optional[PositiveFloat] = Field(None, description="Abort a file read that takes longer than this. None waits indefinitely.")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {value!r}")
        return value

class ColumnMapping(BaseModel):
    """
    Header names accepted for each sample field, in lookup order.
    The dotted names are the ones written by the eye tracker export.
    """
    timestamp: list[str] = ["Recording.timestamp", "timestamp"]
    participant: list[str] = ["Participant.name", "participant"]
    x: list[str] = ["Gaze.point.X", "x"]
    y: list[str] = ["Gaze.point.Y", "y"]
    fixation_duration: list[str] = ["Gaze.event.duration", "fixationDuration", "fixation_duration"]
    aoi_name: list[str] = ["AOI.name", "aoiName", "aoi_name"]

    @field_validator("*")
    @classmethod
    def require_alias(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("Each field needs at least one header name.")
        return value

class DummySourceSettings(BaseModel):
    num_samples: PositiveInt = 5_000
    invalid_every: int = Field(50, ge=0, description="Every n-th row gets an unparseable coordinate. 0 disables.")

class AppSettings(BaseSettings):
    """
    Main application settings, loaded from environment variables and defaults.
    """
    # Pipeline
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    columns: ColumnMapping = Field(default_factory=ColumnMapping)

    # Development
    dummy: DummySourceSettings = Field(default_factory=DummySourceSettings)

    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    __version__: str = version("gaze-dashboard")

    model_config = SettingsConfigDict(
        env_prefix="GAZE_DASH__",
        env_file=".env",
        env_nested_delimiter='__',
        case_sensitive=False
    )
