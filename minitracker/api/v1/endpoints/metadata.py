"""
Metadata endpoints addressed by metadata id.
"""

from fastapi import APIRouter

from minitracker.api.v1.endpoints.list_items import get_metadata_service
from minitracker.core.dependencies import CurrentIdentity
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok

router = APIRouter()


@router.delete("/{metadata_id}", response_model=Envelope[MessageData])
async def delete_metadata(session: DbSession, identity: CurrentIdentity, metadata_id: int):
    """Owner of the parent list only."""
    await get_metadata_service(session).delete(metadata_id, identity)
    return ok(MessageData(message="Metadata deleted successfully"))
