"""Domain Types — rich types and bounds that replace bare primitives across the codebase.

Invariants:
    - SessionId wraps int — assigned by SessionStore, never reused while the process lives
    - Power bounded 1–10; manual Duration bounded 1–120 seconds
    - All valid session states encoded as HeatingState — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", int)
ProgramIdentifier = NewType("ProgramIdentifier", str)   # one char, upper-case


# ─── Bounds ──────────────────────────────────────────────────────

MIN_POWER: int = 1
MAX_POWER: int = 10
MIN_DURATION_SECONDS: int = 1
MAX_DURATION_SECONDS: int = 120

DEFAULT_PROGRESS_CHAR: str = "."   # reserved for manual heating
DEFAULT_ADD_TIME_SECONDS: int = 30
QUICK_START_SECONDS: int = 30
QUICK_START_POWER: int = 10


# ─── Enums ───────────────────────────────────────────────────────

class HeatingState(str, Enum):
    """Heating session lifecycle. FINISHED is terminal."""
    IDLE = "idle"
    HEATING = "heating"
    PAUSED = "paused"
    FINISHED = "finished"


class SessionOperation(str, Enum):
    """Mutating operations — named in InvalidTransitionError and logs."""
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    CANCEL = "cancel"
    ADD_TIME = "add_time"
    TICK = "tick"
