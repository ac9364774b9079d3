"""
Miniature catalog endpoints - filtered, paginated search for everyone, CRUD for admins.
"""

from fastapi import APIRouter, Query, status

from minitracker.config import get_settings
from minitracker.core.dependencies import AdminIdentity
from minitracker.db.repositories.catalog_repository import FactionRepository, UnitTypeRepository
from minitracker.db.repositories.miniature_repository import MiniatureRepository
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.schemas.miniature import MiniatureCreate, MiniatureDetail, MiniaturePage, MiniatureUpdate
from minitracker.services.miniature_service import MiniatureService

router = APIRouter()
settings = get_settings()


def _get_miniature_service(session: DbSession) -> MiniatureService:
    return MiniatureService(
        MiniatureRepository(session), FactionRepository(session), UnitTypeRepository(session)
    )


@router.get("", response_model=Envelope[MiniaturePage])
async def list_miniatures(
    session: DbSession,
    faction: int | None = Query(None, ge=1),
    unit_type: int | None = Query(None, ge=1, alias="unitType"),
    search: str | None = Query(None, max_length=100),
    limit: int = Query(settings.miniature_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
):
    """GET /miniatures?faction=1&unitType=2&search=captain&limit=50&offset=0."""
    svc = _get_miniature_service(session)
    page = await svc.search(
        faction_id=faction,
        unit_type_id=unit_type,
        search=search or None,
        limit=limit,
        offset=offset,
    )
    return ok(page)


@router.get("/{miniature_id}", response_model=Envelope[MiniatureDetail])
async def get_miniature(session: DbSession, miniature_id: int):
    return ok(await _get_miniature_service(session).get(miniature_id))


@router.post("", response_model=Envelope[MiniatureDetail], status_code=status.HTTP_201_CREATED)
async def create_miniature(session: DbSession, identity: AdminIdentity, data: MiniatureCreate):
    return ok(await _get_miniature_service(session).create(data))


@router.put("/{miniature_id}", response_model=Envelope[MiniatureDetail])
async def update_miniature(
    session: DbSession, identity: AdminIdentity, miniature_id: int, data: MiniatureUpdate
):
    miniature = await _get_miniature_service(session).update(miniature_id, data)
    return ok(miniature, message="Miniature updated successfully")


@router.delete("/{miniature_id}", response_model=Envelope[MessageData])
async def delete_miniature(session: DbSession, identity: AdminIdentity, miniature_id: int):
    """Refused with 409 while any list still holds the miniature."""
    await _get_miniature_service(session).delete(miniature_id)
    return ok(MessageData(message="Miniature deleted successfully"))
