"""Session Store — keyed, in-memory collection of heating sessions.

Invariants:
    - No two stored sessions share an id
    - next_id() is sequential and never hands out the same id twice per process
    - list_all() preserves insertion order; no other ordering guarantee

Design Decisions:
    - Sequential counter over random ids: uniqueness by construction, no collision check
    - Store lock guards the dict only; per-session mutation is serialized by the caller
      (SessionService holds one lock per session id)
    - Process-scoped instance injected into services (ADR: no module-level dict)
"""

import itertools
import threading

from microwave.core.domain_types import SessionId
from microwave.core.errors import SessionConflictError, SessionNotFoundError
from microwave.core.heating_session import HeatingSession


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[int, HeatingSession] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    def next_id(self) -> SessionId:
        with self._lock:
            return SessionId(next(self._ids))

    def add(self, session: HeatingSession) -> HeatingSession:
        with self._lock:
            if session.id in self._sessions:
                raise SessionConflictError(session.id)
            self._sessions[session.id] = session
        return session

    def get_by_id(self, session_id: int) -> HeatingSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def list_all(self) -> list[HeatingSession]:
        with self._lock:
            return list(self._sessions.values())

    def update(self, session: HeatingSession) -> HeatingSession:
        """Replace the stored session with the same id."""
        with self._lock:
            if session.id not in self._sessions:
                raise SessionNotFoundError(session.id)
            self._sessions[session.id] = session
        return session

    def remove(self, session_id: int) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        """Drop every session. The id counter keeps running."""
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
