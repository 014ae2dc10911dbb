"""Snapshots — immutable read models returned by the core.

Invariants:
    - One snapshot type per entity (session, program); frozen, no behavior
    - Snapshots never flow back into the core — adapters convert them to wire formats

Design Decisions:
    - Frozen dataclasses over dicts: typed, hashable, and safe to hand across threads
"""

from dataclasses import dataclass
from datetime import datetime

from microwave.core.domain_types import HeatingState


@dataclass(frozen=True)
class SessionSnapshot:
    id: int
    state: HeatingState
    total_seconds: int
    remaining_seconds: int
    total_display: str
    remaining_display: str
    power: int
    progress_char: str
    status_text: str


@dataclass(frozen=True)
class ProgramSnapshot:
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
