"""Example selection configuration schema."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExamplesConfig(BaseModel):
    """Which examples run by default."""
    model_config = ConfigDict(extra="forbid")

    enabled: List[str] = Field(
        default_factory=list,
        description="Example names to run; empty runs every registered example",
    )

    @field_validator("enabled")
    @classmethod
    def validate_unique(cls, v: List[str]) -> List[str]:
        """Reject repeated example names."""
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"Examples listed more than once: {duplicates}")
        return v
