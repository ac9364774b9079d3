"""
List item endpoints - edit/remove items and manage their metadata.
"""

from fastapi import APIRouter, Response, status

from minitracker.core.dependencies import CurrentIdentity, OptionalIdentity
from minitracker.db.repositories.list_repository import (
    ListItemRepository,
    ListRepository,
    MetadataRepository,
)
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.schemas.list import ListItemResponse, ListItemUpdate
from minitracker.schemas.metadata import MetadataResponse, MetadataUpsert
from minitracker.services.access_service import ListAccessService
from minitracker.services.list_item_service import ListItemService
from minitracker.services.metadata_service import MetadataService

router = APIRouter()


def _get_item_service(session: DbSession) -> ListItemService:
    return ListItemService(
        ListRepository(session), ListItemRepository(session), ListAccessService.for_session(session)
    )


def get_metadata_service(session: DbSession) -> MetadataService:
    return MetadataService(
        ListRepository(session), MetadataRepository(session), ListAccessService.for_session(session)
    )


@router.put("/{item_id}", response_model=Envelope[ListItemResponse])
async def update_list_item(session: DbSession, identity: CurrentIdentity, item_id: int, data: ListItemUpdate):
    """Partial update of quantity, statuses and notes. Owner only."""
    item = await _get_item_service(session).update(item_id, identity, data)
    return ok(item, message="List item updated successfully")


@router.delete("/{item_id}", response_model=Envelope[MessageData])
async def delete_list_item(session: DbSession, identity: CurrentIdentity, item_id: int):
    await _get_item_service(session).delete(item_id, identity)
    return ok(MessageData(message="Item removed from list successfully"))


@router.get("/{item_id}/metadata", response_model=Envelope[MetadataResponse])
async def get_item_metadata(session: DbSession, identity: OptionalIdentity, item_id: int):
    """Readable by anyone who can read the parent list."""
    return ok(await get_metadata_service(session).get_for_item(item_id, identity))


@router.post("/{item_id}/metadata", response_model=Envelope[MetadataResponse])
@router.put("/{item_id}/metadata", response_model=Envelope[MetadataResponse])
async def save_item_metadata(
    session: DbSession,
    identity: CurrentIdentity,
    item_id: int,
    data: MetadataUpsert,
    response: Response,
):
    """Create or update the item's metadata: 201 when created, 200 when updated."""
    metadata, created = await get_metadata_service(session).upsert(item_id, identity, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return ok(metadata, message="Metadata saved successfully")
