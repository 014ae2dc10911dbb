"""Session Routes — heating session lifecycle over HTTP.

Invariants:
    - Every handler delegates to SessionService; no state machine logic here
    - Domain errors propagate to the global MicrowaveError handler
    - start/resume/quick-start hand the session to the tick driver when auto-ticking;
      pause/cancel/delete take it back

Design Decisions:
    - Transitions as POST sub-resources (/start, /pause, ...): each is a command,
      not a partial update of a document
    - Manual /tick kept alongside the driver: clients that poll can advance time
      themselves when auto_tick is off
"""

from fastapi import APIRouter, Depends, status

from microwave.api.dependencies import get_session_service, get_tick_driver
from microwave.core.errors import SessionNotFoundError
from microwave.schemas.session import AddTimeRequest, SessionCreate, SessionResponse
from microwave.services.session_service import SessionService
from microwave.services.tick_driver import TickDriver

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


def _respond(snapshot) -> SessionResponse:
    return SessionResponse.model_validate(snapshot)


@router.post(
    "", response_model=SessionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate,
    service: SessionService = Depends(get_session_service),
):
    """Create an idle manual session."""
    snapshot = service.create_session(
        body.duration_seconds, body.power, body.progress_char,
    )
    return _respond(snapshot)


@router.post(
    "/quick-start", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def quick_start(
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    """Create and start a session with the quick-start preset."""
    snapshot = service.quick_start()
    if ticker:
        ticker.drive(snapshot.id)
    return _respond(snapshot)


@router.get("", response_model=list[SessionResponse])
async def list_sessions(
    service: SessionService = Depends(get_session_service),
):
    return [_respond(s) for s in service.list_sessions()]


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: int, service: SessionService = Depends(get_session_service),
):
    snapshot = service.get_session(session_id)
    if snapshot is None:
        raise SessionNotFoundError(session_id)
    return _respond(snapshot)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    if ticker:
        ticker.stop(session_id)
    service.delete_session(session_id)


@router.post("/{session_id}/start", response_model=SessionResponse)
async def start_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    snapshot = service.start(session_id)
    if ticker:
        ticker.drive(session_id)
    return _respond(snapshot)


@router.post("/{session_id}/pause", response_model=SessionResponse)
async def pause_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    snapshot = service.pause(session_id)
    if ticker:
        ticker.stop(session_id)
    return _respond(snapshot)


@router.post("/{session_id}/resume", response_model=SessionResponse)
async def resume_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    snapshot = service.resume(session_id)
    if ticker:
        ticker.drive(session_id)
    return _respond(snapshot)


@router.post("/{session_id}/cancel", response_model=SessionResponse)
async def cancel_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
    ticker: TickDriver | None = Depends(get_tick_driver),
):
    snapshot = service.cancel(session_id)
    if ticker:
        ticker.stop(session_id)
    return _respond(snapshot)


@router.post("/{session_id}/add-time", response_model=SessionResponse)
async def add_time(
    session_id: int,
    body: AddTimeRequest | None = None,
    service: SessionService = Depends(get_session_service),
):
    """Add the configured step (30s by default) or body.seconds."""
    seconds = body.seconds if body else None
    return _respond(service.add_time(session_id, seconds))


@router.post("/{session_id}/tick", response_model=SessionResponse)
async def tick_session(
    session_id: int, service: SessionService = Depends(get_session_service),
):
    """Advance one second. No-op unless heating."""
    return _respond(service.tick(session_id))
