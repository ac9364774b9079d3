"""
List endpoints - own/public listings, detail with statistics, CRUD, adding items.
Design: thin controller; visibility and ownership are decided in the service layer.
"""

from fastapi import APIRouter, Query, status

from minitracker.config import get_settings
from minitracker.core.dependencies import CurrentIdentity, OptionalIdentity
from minitracker.db.repositories.list_repository import ListItemRepository, ListRepository
from minitracker.db.repositories.miniature_repository import MiniatureRepository
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.schemas.list import (
    ListCreate,
    ListDetail,
    ListItemCreate,
    ListItemResponse,
    ListPage,
    ListResponse,
    ListSummary,
    ListUpdate,
)
from minitracker.services.access_service import ListAccessService
from minitracker.services.list_service import ListService

router = APIRouter()
settings = get_settings()


def _get_list_service(session: DbSession) -> ListService:
    return ListService(
        ListRepository(session),
        ListItemRepository(session),
        MiniatureRepository(session),
        ListAccessService.for_session(session),
    )


@router.get("", response_model=Envelope[list[ListSummary] | ListPage])
async def get_lists(
    session: DbSession,
    identity: OptionalIdentity,
    page: int = Query(1, ge=1, le=settings.max_page_number),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """Signed in: your own lists, most recently updated first. Anonymous: a page of public lists."""
    svc = _get_list_service(session)
    if identity.is_authenticated:
        return ok(await svc.lists_for_user(identity))
    return ok(await svc.public_page(page=page, limit=limit))


@router.get("/public", response_model=Envelope[ListPage])
async def get_public_lists(
    session: DbSession,
    page: int = Query(1, ge=1, le=settings.max_page_number),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    return ok(await _get_list_service(session).public_page(page=page, limit=limit))


@router.get("/{list_id}", response_model=Envelope[ListDetail])
async def get_list(session: DbSession, identity: OptionalIdentity, list_id: int):
    """Items and statistics. Public lists are readable by anyone, private ones only by the owner."""
    return ok(await _get_list_service(session).get_detail(list_id, identity))


@router.post("", response_model=Envelope[ListResponse], status_code=status.HTTP_201_CREATED)
async def create_list(session: DbSession, identity: CurrentIdentity, data: ListCreate):
    lst = await _get_list_service(session).create(identity, data)
    return ok(lst, message="List created successfully")


@router.put("/{list_id}", response_model=Envelope[ListResponse])
async def update_list(session: DbSession, identity: CurrentIdentity, list_id: int, data: ListUpdate):
    lst = await _get_list_service(session).update(list_id, identity, data)
    return ok(lst, message="List updated successfully")


@router.delete("/{list_id}", response_model=Envelope[MessageData])
async def delete_list(session: DbSession, identity: CurrentIdentity, list_id: int):
    await _get_list_service(session).delete(list_id, identity)
    return ok(MessageData(message="List deleted successfully"))


@router.post(
    "/{list_id}/items",
    response_model=Envelope[ListItemResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_list_item(session: DbSession, identity: CurrentIdentity, list_id: int, data: ListItemCreate):
    item = await _get_list_service(session).add_item(list_id, identity, data)
    return ok(item, message="Miniature added to list")
