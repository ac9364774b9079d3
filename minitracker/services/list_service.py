"""
List service - list CRUD, list detail with statistics, adding items.
Design: every entry point takes an explicit Identity; visibility comes from ListAccessService.
"""

import logging

from minitracker.core.access import Identity, require_read, require_write
from minitracker.core.errors import NotFound, ValidationError
from minitracker.db.models.list import List, ListItem
from minitracker.db.repositories.list_repository import ListItemRepository, ListRepository
from minitracker.db.repositories.miniature_repository import MiniatureRepository
from minitracker.schemas.list import (
    ListCreate,
    ListDetail,
    ListItemCreate,
    ListItemDetail,
    ListItemResponse,
    ListPage,
    ListResponse,
    ListSummary,
    ListUpdate,
    ListWithOwner,
    PublicListSummary,
)
from minitracker.services.access_service import ListAccessService
from minitracker.services.statistics import compute_statistics

logger = logging.getLogger(__name__)


def blank_to_none(value: str | None) -> str | None:
    return value or None


def _summary(lst: List, item_count: int) -> ListSummary:
    return ListSummary(**ListResponse.model_validate(lst).model_dump(), item_count=item_count)


def _public_summary(lst: List, item_count: int, username: str) -> PublicListSummary:
    return PublicListSummary(
        **ListResponse.model_validate(lst).model_dump(), item_count=item_count, username=username
    )


def _item_detail(row) -> ListItemDetail:
    item, miniature_name, faction_name, unit_type_name, points_value = row
    return ListItemDetail(
        id=item.id,
        miniature_id=item.miniature_id,
        miniature_name=miniature_name,
        faction_name=faction_name,
        unit_type_name=unit_type_name,
        points_value=points_value,
        quantity=item.quantity,
        assembly_status=item.assembly_status,
        painting_status=item.painting_status,
        notes=item.notes,
        added_at=item.added_at,
    )


class ListService:
    """Handles list use cases. Item and metadata edits live in their own services."""

    def __init__(
        self,
        list_repo: ListRepository,
        item_repo: ListItemRepository,
        miniature_repo: MiniatureRepository,
        access: ListAccessService,
    ):
        self.list_repo = list_repo
        self.item_repo = item_repo
        self.miniature_repo = miniature_repo
        self.access = access

    async def lists_for_user(self, identity: Identity) -> list[ListSummary]:
        """The caller's own lists, most recently updated first."""
        rows = await self.list_repo.get_by_user(identity.user_id)
        return [_summary(lst, count) for lst, count in rows]

    async def public_page(self, *, page: int = 1, limit: int = 20) -> ListPage:
        offset = (page - 1) * limit
        rows, total = await self.list_repo.get_public_page(limit=limit, offset=offset)
        lists = [_public_summary(lst, count, username) for lst, count, username in rows]
        return ListPage(
            lists=lists,
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + len(lists) < total,
        )

    async def get_detail(self, list_id: int, identity: Identity) -> ListDetail:
        """List, its enriched items and statistics. 404 if absent, 403 if private and not the owner."""
        _, decision = await self.access.check_list(list_id, identity)
        require_read(decision)

        lst, username = await self.list_repo.get_with_owner(list_id)
        items = [_item_detail(row) for row in await self.item_repo.get_enriched_for_list(list_id)]
        return ListDetail(
            list=ListWithOwner(**ListResponse.model_validate(lst).model_dump(), username=username),
            items=items,
            statistics=compute_statistics(items),
        )

    async def create(self, identity: Identity, data: ListCreate) -> ListResponse:
        lst = await self.list_repo.add(
            List(
                user_id=identity.user_id,
                name=data.name,
                description=blank_to_none(data.description),
                is_public=data.is_public,
            )
        )
        logger.info("List %s created by user %s", lst.id, identity.user_id)
        return ListResponse.model_validate(lst)

    async def update(self, list_id: int, identity: Identity, data: ListUpdate) -> ListResponse:
        fields = data.model_dump(exclude_unset=True)
        if "name" in fields and fields["name"] is None:
            raise ValidationError("List name cannot be empty", field="name")
        if "is_public" in fields and fields["is_public"] is None:
            raise ValidationError("isPublic must be true or false", field="isPublic")

        lst, decision = await self.access.check_list(list_id, identity)
        require_write(decision, "Access denied. You can only edit your own lists.")

        if not fields:
            return ListResponse.model_validate(lst)
        if "description" in fields:
            fields["description"] = blank_to_none(fields["description"])
        for key, value in fields.items():
            setattr(lst, key, value)
        lst = await self.list_repo.save(lst)
        logger.info("List %s updated (%s)", lst.id, ", ".join(sorted(fields)))
        return ListResponse.model_validate(lst)

    async def delete(self, list_id: int, identity: Identity) -> None:
        """Delete a list; its items and their metadata cascade in the database."""
        lst, decision = await self.access.check_list(list_id, identity)
        require_write(decision, "Access denied. You can only delete your own lists.")
        await self.list_repo.delete(lst)
        logger.info("List %s deleted by user %s", list_id, identity.user_id)

    async def add_item(self, list_id: int, identity: Identity, data: ListItemCreate) -> ListItemResponse:
        lst, decision = await self.access.check_list(list_id, identity)
        require_write(decision, "You do not have permission to add items to this list")

        if await self.miniature_repo.get_by_id(data.miniature_id) is None:
            raise NotFound("Miniature not found", field="miniatureId")

        item = await self.item_repo.add(
            ListItem(
                list_id=lst.id,
                miniature_id=data.miniature_id,
                quantity=data.quantity,
                assembly_status=data.assembly_status,
                painting_status=data.painting_status,
                notes=blank_to_none(data.notes),
            )
        )
        await self.list_repo.touch(lst)
        logger.info("Miniature %s added to list %s as item %s", data.miniature_id, lst.id, item.id)
        return ListItemResponse.model_validate(item)
