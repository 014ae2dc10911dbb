"""Heating Session — the microwave state machine.

Invariants:
    - IDLE is initial, FINISHED is terminal
    - 0 <= remaining_seconds <= total_seconds at all times
    - remaining_seconds == 0 once FINISHED (and right after cancel)
    - total_seconds only grows (via add_time), power never changes
    - Invalid transitions raise InvalidTransitionError; tick() alone no-ops instead
    - status_text is derived on read, never stored

Design Decisions:
    - Plain class, no IO, no locks: callers serialize mutations per session
      (ADR: the core stays synchronous, concurrency belongs to the shell)
    - AddTime band is the manual [1s, 120s] band even for catalog-seeded sessions
      (ADR: matches the reference behavior, open question recorded in DESIGN.md)
"""

from microwave.core.domain_types import (
    DEFAULT_PROGRESS_CHAR,
    HeatingState,
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    SessionId,
    SessionOperation,
)
from microwave.core.errors import (
    InvalidSessionError,
    InvalidTransitionError,
    OutOfRangeError,
)
from microwave.core.format_status import format_duration, render_status
from microwave.core.snapshots import SessionSnapshot
from microwave.core.value_objects import Duration, Power


def validate_progress_char(progress_char: str) -> str:
    """Return the character unchanged or raise InvalidSessionError."""
    if not isinstance(progress_char, str) or len(progress_char) != 1:
        raise InvalidSessionError(
            f"progress_char must be exactly one character, got {progress_char!r}",
            "progress_char", progress_char,
        )
    return progress_char


class HeatingSession:
    """One heating run. Created IDLE by a factory, mutated by the operations below."""

    def __init__(
        self,
        session_id: SessionId,
        duration: Duration,
        power: Power,
        progress_char: str = DEFAULT_PROGRESS_CHAR,
    ):
        self.id = session_id
        self._power = power
        self._progress_char = validate_progress_char(progress_char)
        self._total_seconds = duration.seconds
        self._remaining_seconds = duration.seconds
        self._state = HeatingState.IDLE

    # --- Read-only view --------------------------------------------------------

    @property
    def state(self) -> HeatingState:
        return self._state

    @property
    def power(self) -> Power:
        return self._power

    @property
    def progress_char(self) -> str:
        return self._progress_char

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def status_text(self) -> str:
        return render_status(
            self._state,
            self._total_seconds,
            self._remaining_seconds,
            self._power.value,
            self._progress_char,
        )

    # --- Transitions -----------------------------------------------------------

    def start(self) -> None:
        self._require(
            SessionOperation.START, HeatingState.IDLE, HeatingState.PAUSED,
        )
        self._state = HeatingState.HEATING

    def pause(self) -> None:
        self._require(SessionOperation.PAUSE, HeatingState.HEATING)
        self._state = HeatingState.PAUSED

    def resume(self) -> None:
        self._require(SessionOperation.RESUME, HeatingState.PAUSED)
        self._state = HeatingState.HEATING

    def cancel(self) -> None:
        """Universal reset to IDLE from any non-terminal state."""
        self._forbid_finished(SessionOperation.CANCEL)
        self._remaining_seconds = 0
        self._state = HeatingState.IDLE

    def add_time(self, seconds: int) -> None:
        """Extend remaining and total time; the result must stay inside [1s, 120s]."""
        self._forbid_finished(SessionOperation.ADD_TIME)
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 1:
            raise OutOfRangeError("added_seconds", seconds, 1, None)
        new_remaining = self._remaining_seconds + seconds
        if not MIN_DURATION_SECONDS <= new_remaining <= MAX_DURATION_SECONDS:
            raise OutOfRangeError(
                "remaining_seconds", new_remaining,
                MIN_DURATION_SECONDS, MAX_DURATION_SECONDS,
            )
        self._remaining_seconds = new_remaining
        self._total_seconds += seconds

    def tick(self) -> bool:
        """Advance one second. Returns False (no-op) unless HEATING."""
        if self._state is not HeatingState.HEATING:
            return False
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._remaining_seconds == 0:
            self._state = HeatingState.FINISHED
        return True

    # --- Snapshot --------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            id=self.id,
            state=self._state,
            total_seconds=self._total_seconds,
            remaining_seconds=self._remaining_seconds,
            total_display=format_duration(self._total_seconds),
            remaining_display=format_duration(self._remaining_seconds),
            power=self._power.value,
            progress_char=self._progress_char,
            status_text=self.status_text,
        )

    # --- Guards ----------------------------------------------------------------

    def _require(
        self, operation: SessionOperation, *allowed: HeatingState,
    ) -> None:
        if self._state not in allowed:
            raise InvalidTransitionError(operation.value, self._state.value)

    def _forbid_finished(self, operation: SessionOperation) -> None:
        if self._state is HeatingState.FINISHED:
            raise InvalidTransitionError(operation.value, self._state.value)

    def __repr__(self) -> str:
        return (
            f"HeatingSession(id={self.id}, state={self._state.value}, "
            f"remaining={self._remaining_seconds}/{self._total_seconds}s, "
            f"power={self._power.value})"
        )
