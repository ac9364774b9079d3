"""
Catalog repositories - factions and unit types.
Both tables share the same shape, so the queries live in one generic class.
"""

from typing import TypeVar

from sqlalchemy import select

from minitracker.db.models.catalog import Faction, UnitType
from minitracker.db.models.miniature import Miniature
from minitracker.db.repositories.base_repository import BaseRepository

CatalogModel = TypeVar("CatalogModel", Faction, UnitType)


class NamedCatalogRepository(BaseRepository[CatalogModel]):
    """Unique-name reference table that miniatures point at through `reference_column`."""

    def __init__(self, session, model: type[CatalogModel], reference_column):
        super().__init__(session, model)
        self.reference_column = reference_column

    async def get_all(self) -> list[CatalogModel]:
        result = await self.session.execute(select(self.model).order_by(self.model.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> CatalogModel | None:
        result = await self.session.execute(select(self.model).where(self.model.name == name))
        return result.scalar_one_or_none()

    async def is_in_use(self, id: int) -> bool:
        """True when at least one miniature references this row."""
        result = await self.session.execute(
            select(Miniature.id).where(self.reference_column == id).limit(1)
        )
        return result.first() is not None


class FactionRepository(NamedCatalogRepository[Faction]):
    def __init__(self, session):
        super().__init__(session, Faction, Miniature.faction_id)


class UnitTypeRepository(NamedCatalogRepository[UnitType]):
    def __init__(self, session):
        super().__init__(session, UnitType, Miniature.unit_type_id)
