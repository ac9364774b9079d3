"""
List repository - lists, list items and metadata data access.
Challenge: item counts and enriched item rows in one query each (no N+1).
"""

from sqlalchemy import func, select

from minitracker.db.base import utcnow
from minitracker.db.models.catalog import Faction, UnitType
from minitracker.db.models.list import List, ListItem, Metadata
from minitracker.db.models.miniature import Miniature
from minitracker.db.models.user import User
from minitracker.db.repositories.base_repository import BaseRepository


class ListRepository(BaseRepository[List]):
    """List queries. Summary rows come back as (List, item_count[, username])."""

    def __init__(self, session):
        super().__init__(session, List)

    async def get_with_owner(self, id: int):
        """(List, owner username) or None."""
        result = await self.session.execute(
            select(List, User.username).join(User, List.user_id == User.id).where(List.id == id)
        )
        return result.one_or_none()

    async def get_by_user(self, user_id: int) -> list:
        """All lists of one user with item counts, most recently updated first."""
        result = await self.session.execute(
            select(List, func.count(ListItem.id).label("item_count"))
            .outerjoin(ListItem, ListItem.list_id == List.id)
            .where(List.user_id == user_id)
            .group_by(List.id)
            .order_by(List.updated_at.desc(), List.id.desc())
        )
        return list(result.all())

    async def get_public_page(self, *, limit: int = 20, offset: int = 0) -> tuple[list, int]:
        """Page of public lists with owner username and item count, plus total public lists."""
        total = await self.count_where(List.is_public.is_(True))
        result = await self.session.execute(
            select(List, func.count(ListItem.id).label("item_count"), User.username)
            .join(User, List.user_id == User.id)
            .outerjoin(ListItem, ListItem.list_id == List.id)
            .where(List.is_public.is_(True))
            .group_by(List.id, User.username)
            .order_by(List.updated_at.desc(), List.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.all()), total

    async def touch(self, lst: List) -> List:
        """Bump updated_at after a child row changed; the list's own fields stay as-is."""
        lst.updated_at = utcnow()
        return await self.save(lst)


class ListItemRepository(BaseRepository[ListItem]):
    def __init__(self, session):
        super().__init__(session, ListItem)

    async def get_enriched_for_list(self, list_id: int) -> list:
        """Items of a list, newest first, as (ListItem, miniature_name, faction_name, unit_type_name, points_value)."""
        result = await self.session.execute(
            select(
                ListItem,
                Miniature.name.label("miniature_name"),
                Faction.name.label("faction_name"),
                UnitType.name.label("unit_type_name"),
                Miniature.points_value.label("points_value"),
            )
            .join(Miniature, ListItem.miniature_id == Miniature.id)
            .outerjoin(Faction, Miniature.faction_id == Faction.id)
            .outerjoin(UnitType, Miniature.unit_type_id == UnitType.id)
            .where(ListItem.list_id == list_id)
            .order_by(ListItem.added_at.desc(), ListItem.id.desc())
        )
        return list(result.all())


class MetadataRepository(BaseRepository[Metadata]):
    def __init__(self, session):
        super().__init__(session, Metadata)

    async def get_by_list_item_id(self, list_item_id: int) -> Metadata | None:
        result = await self.session.execute(
            select(Metadata).where(Metadata.list_item_id == list_item_id).order_by(Metadata.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def upsert(self, list_item_id: int, fields: dict) -> tuple[Metadata, bool]:
        """
        Create-or-update the single metadata row of a list item.
        Only keys present in `fields` are written on update. Returns (row, created).
        """
        existing = await self.get_by_list_item_id(list_item_id)
        if existing is None:
            created = await self.add(Metadata(list_item_id=list_item_id, **fields))
            return created, True
        for key, value in fields.items():
            setattr(existing, key, value)
        return await self.save(existing), False
