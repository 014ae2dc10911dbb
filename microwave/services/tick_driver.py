"""Tick Driver — externally owned once-per-second cadence for heating sessions.

Invariants:
    - At most one driving task per session id
    - A task stops as soon as its session leaves HEATING or disappears
    - stop() and shutdown() cancel tasks; cancellation never mutates a session

Design Decisions:
    - asyncio task per session over a thread per session: the core stays synchronous,
      concurrency lives entirely in this shell component
    - Ticks go through SessionService.tick, so the per-session lock applies to driver
      and API callers alike
"""

import asyncio
import logging

from microwave.core.domain_types import HeatingState
from microwave.core.errors import SessionNotFoundError
from microwave.services.session_service import SessionService

logger = logging.getLogger(__name__)


class TickDriver:
    def __init__(self, sessions: SessionService, interval_seconds: float = 1.0):
        self._sessions = sessions
        self._interval = interval_seconds
        self._tasks: dict[int, asyncio.Task] = {}

    def drive(self, session_id: int) -> asyncio.Task:
        """Start ticking a session. Returns the existing task if already driven."""
        task = self._tasks.get(session_id)
        if task is not None and not task.done():
            return task
        task = asyncio.get_running_loop().create_task(
            self._run(session_id), name=f"tick-session-{session_id}",
        )
        self._tasks[session_id] = task
        task.add_done_callback(lambda t: self._forget(session_id, t))
        return task

    def stop(self, session_id: int) -> bool:
        """Cancel the driving task, if any. Returns whether one was running."""
        task = self._tasks.pop(session_id, None)
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def is_driving(self, session_id: int) -> bool:
        task = self._tasks.get(session_id)
        return task is not None and not task.done()

    async def shutdown(self) -> None:
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, session_id: int) -> None:
        try:
            while True:
                await asyncio.sleep(self._interval)
                try:
                    snapshot = self._sessions.tick(session_id)
                except SessionNotFoundError:
                    logger.info(
                        "Session removed while ticking, driver stopped",
                        extra={"session_id": session_id},
                    )
                    return
                if snapshot.state is not HeatingState.HEATING:
                    return
        except asyncio.CancelledError:
            logger.debug("Tick driver cancelled", extra={"session_id": session_id})
            raise

    def _forget(self, session_id: int, task: asyncio.Task) -> None:
        if self._tasks.get(session_id) is task:
            del self._tasks[session_id]
