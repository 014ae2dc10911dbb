"""Program Routes — catalog reads, custom program CRUD, and program-based heating.

Invariants:
    - Static paths (/predefined, /custom) registered before /{identifier}
    - Identifier lookups are case-insensitive (normalized in core)
    - Predefined programs can be read and instantiated, never deleted
"""

from fastapi import APIRouter, Depends, status

from microwave.api.dependencies import get_catalog_service, get_session_service
from microwave.core.errors import ProgramNotFoundError
from microwave.schemas.program import ProgramCreate, ProgramResponse
from microwave.schemas.session import SessionResponse
from microwave.services.catalog_service import CatalogService
from microwave.services.session_service import SessionService

router = APIRouter(prefix="/api/v1/programs", tags=["programs"])


@router.get("", response_model=list[ProgramResponse])
async def list_programs(catalog: CatalogService = Depends(get_catalog_service)):
    return [ProgramResponse.model_validate(p) for p in catalog.list_all()]


@router.get("/predefined", response_model=list[ProgramResponse])
async def list_predefined(catalog: CatalogService = Depends(get_catalog_service)):
    return [ProgramResponse.model_validate(p) for p in catalog.list_predefined()]


@router.get("/custom", response_model=list[ProgramResponse])
async def list_custom(catalog: CatalogService = Depends(get_catalog_service)):
    return [ProgramResponse.model_validate(p) for p in catalog.list_custom()]


@router.get("/{identifier}", response_model=ProgramResponse)
async def get_program(
    identifier: str, catalog: CatalogService = Depends(get_catalog_service),
):
    program = catalog.get_program(identifier)
    if program is None:
        raise ProgramNotFoundError(identifier)
    return ProgramResponse.model_validate(program)


@router.post(
    "", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED,
)
async def create_program(
    body: ProgramCreate, catalog: CatalogService = Depends(get_catalog_service),
):
    program = catalog.add_program(
        identifier=body.identifier,
        name=body.name,
        food=body.food,
        duration_seconds=body.duration_seconds,
        power=body.power,
        progress_char=body.progress_char,
        instructions=body.instructions,
    )
    return ProgramResponse.model_validate(program)


@router.delete("/{identifier}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_program(
    identifier: str, catalog: CatalogService = Depends(get_catalog_service),
):
    catalog.remove_program(identifier)


@router.post(
    "/{identifier}/sessions", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session_from_program(
    identifier: str, sessions: SessionService = Depends(get_session_service),
):
    """Create an idle session parameterized by the program."""
    snapshot = sessions.create_from_program(identifier)
    return SessionResponse.model_validate(snapshot)
