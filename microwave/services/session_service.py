"""Session Service — orchestrates heating sessions for the API and tick driver.

Invariants:
    - Every mutating call on a session runs under that session's lock
    - Operations on different sessions never contend on the same lock
    - Callers only ever receive SessionSnapshot, never the live HeatingSession
    - Missing ids raise SessionNotFoundError (get_session returns None instead)

Design Decisions:
    - Per-session threading.Lock in a dict guarded by one registry lock: two mutations
      on one session serialize, unrelated sessions proceed concurrently
    - tick() returns the snapshot even when it was a no-op: pollers need the state
"""

import logging
import threading
from collections.abc import Callable

from microwave.core.domain_types import (
    DEFAULT_ADD_TIME_SECONDS,
    DEFAULT_PROGRESS_CHAR,
    QUICK_START_POWER,
    QUICK_START_SECONDS,
    HeatingState,
    SessionOperation,
)
from microwave.core.errors import SessionNotFoundError
from microwave.core.heating_session import HeatingSession, validate_progress_char
from microwave.core.program_catalog import ProgramCatalog
from microwave.core.session_store import SessionStore
from microwave.core.snapshots import SessionSnapshot
from microwave.core.value_objects import Duration, Power

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(
        self,
        store: SessionStore,
        catalog: ProgramCatalog,
        add_time_step_seconds: int = DEFAULT_ADD_TIME_SECONDS,
        quick_start_seconds: int = QUICK_START_SECONDS,
        quick_start_power: int = QUICK_START_POWER,
    ):
        self._store = store
        self._catalog = catalog
        self._add_time_step = add_time_step_seconds
        self._quick_start_seconds = quick_start_seconds
        self._quick_start_power = quick_start_power
        self._locks: dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # --- Creation --------------------------------------------------------------

    def create_session(
        self,
        duration_seconds: int,
        power: int,
        progress_char: str = DEFAULT_PROGRESS_CHAR,
    ) -> SessionSnapshot:
        """Manual session: Duration and Power validated in the normal band."""
        duration = Duration(duration_seconds)
        level = Power(power)
        char = validate_progress_char(progress_char)
        session = HeatingSession(self._store.next_id(), duration, level, char)
        self._store.add(session)
        logger.info(
            f"Session created: {duration.display} at power {level}",
            extra={"session_id": session.id},
        )
        return session.snapshot()

    def quick_start(self) -> SessionSnapshot:
        """Create and start a session with the quick-start preset."""
        snapshot = self.create_session(
            self._quick_start_seconds, self._quick_start_power,
        )
        return self.start(snapshot.id)

    def create_from_program(self, identifier: str) -> SessionSnapshot:
        """Instantiate a session from a catalog program (bypass duration)."""
        program = self._catalog.require(identifier)
        session = program.instantiate(self._store.next_id())
        self._store.add(session)
        logger.info(
            f"Session created from program '{program.name}'",
            extra={
                "session_id": session.id,
                "program_identifier": program.identifier,
            },
        )
        return session.snapshot()

    # --- Transitions -----------------------------------------------------------

    def start(self, session_id: int) -> SessionSnapshot:
        return self._mutate(session_id, SessionOperation.START, HeatingSession.start)

    def pause(self, session_id: int) -> SessionSnapshot:
        return self._mutate(session_id, SessionOperation.PAUSE, HeatingSession.pause)

    def resume(self, session_id: int) -> SessionSnapshot:
        return self._mutate(session_id, SessionOperation.RESUME, HeatingSession.resume)

    def cancel(self, session_id: int) -> SessionSnapshot:
        return self._mutate(session_id, SessionOperation.CANCEL, HeatingSession.cancel)

    def add_time(
        self, session_id: int, seconds: int | None = None,
    ) -> SessionSnapshot:
        delta = self._add_time_step if seconds is None else seconds
        return self._mutate(
            session_id, SessionOperation.ADD_TIME,
            lambda s: s.add_time(delta),
        )

    def tick(self, session_id: int) -> SessionSnapshot:
        """Advance one second. No-op (not an error) unless the session is heating."""
        session = self._require(session_id)
        with self._lock_for(session_id):
            advanced = session.tick()
            if advanced:
                self._store.update(session)
            snapshot = session.snapshot()
        if advanced and snapshot.state is HeatingState.FINISHED:
            logger.info(
                f"Session finished after {snapshot.total_display}",
                extra={"session_id": session_id, "state": snapshot.state.value},
            )
        return snapshot

    # --- Reads & removal -------------------------------------------------------

    def get_session(self, session_id: int) -> SessionSnapshot | None:
        session = self._store.get_by_id(session_id)
        return session.snapshot() if session else None

    def list_sessions(self) -> list[SessionSnapshot]:
        return [s.snapshot() for s in self._store.list_all()]

    def delete_session(self, session_id: int) -> None:
        self._require(session_id)
        with self._lock_for(session_id):
            self._store.remove(session_id)
        with self._locks_guard:
            self._locks.pop(session_id, None)
        logger.info("Session deleted", extra={"session_id": session_id})

    # --- Internals -------------------------------------------------------------

    def _require(self, session_id: int) -> HeatingSession:
        session = self._store.get_by_id(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def _lock_for(self, session_id: int) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.Lock()
            return lock

    def _mutate(
        self,
        session_id: int,
        operation: SessionOperation,
        action: Callable[[HeatingSession], None],
    ) -> SessionSnapshot:
        session = self._require(session_id)
        with self._lock_for(session_id):
            action(session)
            self._store.update(session)
            snapshot = session.snapshot()
        logger.info(
            f"Session {operation.value}: {snapshot.remaining_display} remaining",
            extra={
                "session_id": session_id,
                "operation": operation.value,
                "state": snapshot.state.value,
            },
        )
        return snapshot
