"""
List item service - edit and remove items; every change touches the parent list.
"""

import logging

from pydantic.alias_generators import to_camel

from minitracker.core.access import Identity, require_write
from minitracker.core.errors import ValidationError
from minitracker.db.repositories.list_repository import ListItemRepository, ListRepository
from minitracker.schemas.list import ListItemResponse, ListItemUpdate
from minitracker.services.access_service import ListAccessService
from minitracker.services.list_service import blank_to_none

logger = logging.getLogger(__name__)

# Columns that may be omitted from an update but never set to null
_NON_NULLABLE = ("quantity", "assembly_status", "painting_status")


class ListItemService:
    def __init__(
        self,
        list_repo: ListRepository,
        item_repo: ListItemRepository,
        access: ListAccessService,
    ):
        self.list_repo = list_repo
        self.item_repo = item_repo
        self.access = access

    async def update(self, item_id: int, identity: Identity, data: ListItemUpdate) -> ListItemResponse:
        """Partial update: fields absent from the body keep their value."""
        fields = data.model_dump(exclude_unset=True)
        for key in _NON_NULLABLE:
            if key in fields and fields[key] is None:
                raise ValidationError(f"{to_camel(key)} cannot be null", field=to_camel(key))

        item, lst, decision = await self.access.check_item(item_id, identity)
        require_write(decision, "You do not have permission to edit this item")

        if not fields:
            return ListItemResponse.model_validate(item)
        if "notes" in fields:
            fields["notes"] = blank_to_none(fields["notes"])
        for key, value in fields.items():
            setattr(item, key, value)
        item = await self.item_repo.save(item)
        await self.list_repo.touch(lst)
        logger.info("List item %s updated (%s)", item.id, ", ".join(sorted(fields)))
        return ListItemResponse.model_validate(item)

    async def delete(self, item_id: int, identity: Identity) -> None:
        """Remove an item; its metadata cascades in the database."""
        item, lst, decision = await self.access.check_item(item_id, identity)
        require_write(decision, "You do not have permission to delete this item")
        await self.item_repo.delete(item)
        await self.list_repo.touch(lst)
        logger.info("List item %s removed from list %s", item_id, lst.id)
