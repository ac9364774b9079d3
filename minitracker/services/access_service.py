"""
List access service - resolves lists, items and metadata to their parent list
and applies the single ownership rule from core.access.
"""

from minitracker.core.access import AccessDecision, Identity, decide_access
from minitracker.core.errors import NotFound
from minitracker.db.models.list import List, ListItem, Metadata
from minitracker.db.repositories.list_repository import (
    ListItemRepository,
    ListRepository,
    MetadataRepository,
)


class ListAccessService:
    """Pure reads: no check here ever writes."""

    def __init__(
        self,
        list_repo: ListRepository,
        item_repo: ListItemRepository,
        metadata_repo: MetadataRepository,
    ):
        self.list_repo = list_repo
        self.item_repo = item_repo
        self.metadata_repo = metadata_repo

    @classmethod
    def for_session(cls, session) -> "ListAccessService":
        return cls(ListRepository(session), ListItemRepository(session), MetadataRepository(session))

    async def resolve_list(self, list_id: int) -> List:
        """The list row (owner id and public flag) or NotFound."""
        lst = await self.list_repo.get_by_id(list_id)
        if lst is None:
            raise NotFound("List not found")
        return lst

    async def resolve_list_owner(self, list_id: int) -> int | None:
        """Owner id of a list, or None when the list does not exist."""
        lst = await self.list_repo.get_by_id(list_id)
        return lst.user_id if lst else None

    async def check_list(self, list_id: int, identity: Identity) -> tuple[List, AccessDecision]:
        lst = await self.resolve_list(list_id)
        return lst, decide_access(lst.user_id, lst.is_public, identity.user_id)

    async def check_item(
        self, item_id: int, identity: Identity
    ) -> tuple[ListItem, List, AccessDecision]:
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise NotFound("List item not found")
        lst, decision = await self.check_list(item.list_id, identity)
        return item, lst, decision

    async def check_metadata(
        self, metadata_id: int, identity: Identity
    ) -> tuple[Metadata, List, AccessDecision]:
        metadata = await self.metadata_repo.get_by_id(metadata_id)
        if metadata is None:
            raise NotFound("Metadata not found")
        _, lst, decision = await self.check_item(metadata.list_item_id, identity)
        return metadata, lst, decision
