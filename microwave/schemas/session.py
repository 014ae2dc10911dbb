"""Session Schemas — Pydantic models for heating session endpoints.

Invariants:
    - SessionCreate.progress_char is exactly one character
    - duration/power bounds are NOT checked here: the core raises OutOfRangeError
      with the offending value, keeping one source of truth for the bands
"""

from pydantic import BaseModel, ConfigDict, Field

from microwave.core.domain_types import DEFAULT_PROGRESS_CHAR, HeatingState


class SessionCreate(BaseModel):
    """Manual heating request."""
    duration_seconds: int
    power: int = 10
    progress_char: str = Field(
        DEFAULT_PROGRESS_CHAR, min_length=1, max_length=1,
    )


class AddTimeRequest(BaseModel):
    """Optional override of the default add-time step."""
    seconds: int | None = None


class SessionResponse(BaseModel):
    """Session response — mirrors core SessionSnapshot."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    state: HeatingState
    total_seconds: int
    remaining_seconds: int
    total_display: str
    remaining_display: str
    power: int
    progress_char: str
    status_text: str
