"""Logging configuration schema."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """How log lines are rendered."""
    PLAIN = "plain"
    CONSOLE = "console"
    JSON = "json"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    STDOUT = "stdout"
    FILE = "file"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(LogLevel.INFO, description="Minimum log level")
    format: LogFormat = Field(LogFormat.PLAIN, description="Log line renderer")
    destination: LogDestination = Field(
        LogDestination.STDOUT, description="Where log lines are written"
    )
    file_path: Optional[str] = Field(
        None, description="Log file path, required for file destinations"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str) and not isinstance(v, Enum):
            return v.upper()
        return v

    @field_validator("format", "destination", mode="before")
    @classmethod
    def normalize_choice(cls, v):
        """Accept formats and destinations in any case."""
        if isinstance(v, str) and not isinstance(v, Enum):
            return v.lower()
        return v

    @model_validator(mode="after")
    def ensure_file_path(self) -> "LoggingConfig":
        """Ensure a file path is set when logging to a file."""
        if self.destination != LogDestination.STDOUT and not self.file_path:
            raise ValueError(
                f"file_path is required for log destination '{self.destination.value}'"
            )
        return self

    @property
    def writes_to_console(self) -> bool:
        return self.destination in (LogDestination.STDOUT, LogDestination.BOTH)

    @property
    def writes_to_file(self) -> bool:
        return self.destination in (LogDestination.FILE, LogDestination.BOTH)
