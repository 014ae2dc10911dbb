"""Program Schemas — Pydantic models for catalog endpoints.

Invariants:
    - ProgramCreate.identifier and progress_char are exactly one character
    - name is stripped and non-empty
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProgramCreate(BaseModel):
    """Custom program creation."""
    identifier: str = Field(min_length=1, max_length=1)
    name: str = Field(min_length=1, max_length=100)
    food: str = Field("", max_length=200)
    duration_seconds: int
    power: int
    progress_char: str = Field(min_length=1, max_length=1)
    instructions: str = Field("", max_length=2000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProgramResponse(BaseModel):
    """Program response — mirrors core ProgramSnapshot."""
    model_config = ConfigDict(from_attributes=True)

    identifier: str
    name: str
    food: str
    duration_seconds: int
    duration_display: str
    power: int
    instructions: str
    progress_char: str
    is_custom: bool
    created_at: datetime
