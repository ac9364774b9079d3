"""
Miniature repository - filtered catalog search with faction/unit type names joined.
"""

from sqlalchemy import Select, func, select

from minitracker.db.models.catalog import Faction, UnitType
from minitracker.db.models.list import ListItem
from minitracker.db.models.miniature import Miniature
from minitracker.db.repositories.base_repository import BaseRepository


class MiniatureRepository(BaseRepository[Miniature]):
    """Miniature queries. Rows come back as (Miniature, faction_name, unit_type_name)."""

    def __init__(self, session):
        super().__init__(session, Miniature)

    def _with_names(self) -> Select:
        return (
            select(
                Miniature,
                Faction.name.label("faction_name"),
                UnitType.name.label("unit_type_name"),
            )
            .outerjoin(Faction, Miniature.faction_id == Faction.id)
            .outerjoin(UnitType, Miniature.unit_type_id == UnitType.id)
        )

    async def search(
        self,
        *,
        faction_id: int | None = None,
        unit_type_id: int | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list, int]:
        """Page of miniatures ordered by name, plus the unpaginated total."""
        criteria = []
        if faction_id:
            criteria.append(Miniature.faction_id == faction_id)
        if unit_type_id:
            criteria.append(Miniature.unit_type_id == unit_type_id)
        if search:
            criteria.append(Miniature.name.ilike(f"%{search}%"))

        total = await self.count_where(*criteria)
        result = await self.session.execute(
            self._with_names()
            .where(*criteria)
            .order_by(Miniature.name, Miniature.id)
            .limit(limit)
            .offset(offset)
        )
        return list(result.all()), total

    async def get_detail(self, id: int):
        """Single (Miniature, faction_name, unit_type_name) row or None."""
        result = await self.session.execute(self._with_names().where(Miniature.id == id))
        return result.one_or_none()

    async def is_in_use(self, id: int) -> bool:
        """True when any list item references this miniature."""
        result = await self.session.execute(
            select(func.count()).select_from(ListItem).where(ListItem.miniature_id == id)
        )
        return result.scalar_one() > 0
