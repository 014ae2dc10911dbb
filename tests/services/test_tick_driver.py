"""Tick Driver — externally owned cadence that advances heating sessions.

Tests cover:
    - A driven session ticks down to FINISHED and the task ends
    - drive() is idempotent per session
    - stop() cancels without mutating the session
    - The task ends on its own when the session is paused or deleted
    - shutdown() cancels everything

Design Decisions:
    - asyncio.sleep patched to a zero-delay yield: tests assert on tick counts,
      not wall-clock time
"""

import asyncio

import pytest

from microwave.core.domain_types import HeatingState
from microwave.services.tick_driver import TickDriver

_real_sleep = asyncio.sleep


@pytest.fixture
def fast_sleep(monkeypatch):
    async def _yield(_delay):
        await _real_sleep(0)
    monkeypatch.setattr("microwave.services.tick_driver.asyncio.sleep", _yield)


@pytest.fixture
def driver(session_service):
    return TickDriver(session_service, interval_seconds=1.0)


async def test_driven_session_finishes(session_service, driver, fast_sleep):
    sid = session_service.create_session(5, 3).id
    session_service.start(sid)
    await driver.drive(sid)
    snap = session_service.get_session(sid)
    assert snap.state is HeatingState.FINISHED
    assert snap.remaining_seconds == 0
    assert not driver.is_driving(sid)


async def test_drive_is_idempotent(session_service, driver):
    sid = session_service.create_session(30, 3).id
    session_service.start(sid)
    first = driver.drive(sid)
    assert driver.drive(sid) is first
    await driver.shutdown()


async def test_stop_cancels_without_mutation(session_service, driver):
    sid = session_service.create_session(30, 3).id
    session_service.start(sid)
    task = driver.drive(sid)
    await _real_sleep(0)
    assert driver.stop(sid) is True
    with pytest.raises(asyncio.CancelledError):
        await task
    snap = session_service.get_session(sid)
    assert snap.state is HeatingState.HEATING
    assert snap.remaining_seconds == 30
    assert driver.stop(sid) is False


async def test_task_ends_when_session_paused(session_service, driver, fast_sleep):
    sid = session_service.create_session(60, 3).id
    session_service.start(sid)
    task = driver.drive(sid)
    session_service.pause(sid)
    await task
    assert session_service.get_session(sid).state is HeatingState.PAUSED


async def test_task_ends_when_session_deleted(session_service, driver, fast_sleep):
    sid = session_service.create_session(60, 3).id
    session_service.start(sid)
    task = driver.drive(sid)
    session_service.delete_session(sid)
    await task
    assert not driver.is_driving(sid)


async def test_shutdown_cancels_all(session_service, driver):
    ids = [session_service.create_session(30, 1).id for _ in range(3)]
    for sid in ids:
        session_service.start(sid)
        driver.drive(sid)
    await driver.shutdown()
    assert not any(driver.is_driving(sid) for sid in ids)
