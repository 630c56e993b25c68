"""Main application configuration schema."""
from pydantic import BaseModel, ConfigDict, Field

from .examples_schema import ExamplesConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    examples: ExamplesConfig = Field(default_factory=lambda: ExamplesConfig())
