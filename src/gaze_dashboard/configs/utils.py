from pydantic import BaseModel, Field

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    progress_step: int = Field(10, ge=1, le=100, description="Console progress is logged every n percent.")
