"""
Metadata service - read, upsert and delete the single metadata row of a list item.
"""

import logging

from minitracker.core.access import Identity, require_read, require_write
from minitracker.core.errors import NotFound
from minitracker.db.repositories.list_repository import ListRepository, MetadataRepository
from minitracker.schemas.metadata import MetadataResponse, MetadataUpsert
from minitracker.services.access_service import ListAccessService

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("paint_colors", "techniques", "storage_location", "custom_notes")


class MetadataService:
    def __init__(
        self,
        list_repo: ListRepository,
        metadata_repo: MetadataRepository,
        access: ListAccessService,
    ):
        self.list_repo = list_repo
        self.metadata_repo = metadata_repo
        self.access = access

    async def get_for_item(self, item_id: int, identity: Identity) -> MetadataResponse:
        _, _, decision = await self.access.check_item(item_id, identity)
        require_read(decision, "You do not have permission to view this metadata")
        metadata = await self.metadata_repo.get_by_list_item_id(item_id)
        if metadata is None:
            raise NotFound("No metadata found for this item")
        return MetadataResponse.model_validate(metadata)

    async def upsert(
        self, item_id: int, identity: Identity, data: MetadataUpsert
    ) -> tuple[MetadataResponse, bool]:
        """Create or update; never a second row for the same item. Returns (metadata, created)."""
        item, lst, decision = await self.access.check_item(item_id, identity)
        require_write(decision, "You do not have permission to edit this metadata")

        fields = data.model_dump(exclude_unset=True)
        for key in _TEXT_FIELDS:
            if key in fields:
                fields[key] = fields[key] or None
        metadata, created = await self.metadata_repo.upsert(item.id, fields)
        await self.list_repo.touch(lst)
        logger.info("Metadata %s %s for list item %s", metadata.id, "created" if created else "updated", item.id)
        return MetadataResponse.model_validate(metadata), created

    async def delete(self, metadata_id: int, identity: Identity) -> None:
        metadata, lst, decision = await self.access.check_metadata(metadata_id, identity)
        require_write(decision, "You do not have permission to delete this metadata")
        await self.metadata_repo.delete(metadata)
        await self.list_repo.touch(lst)
        logger.info("Metadata %s deleted", metadata_id)
