"""
Miniature service - catalog search and admin CRUD.
Challenge: references to factions/unit types are checked here, before any write.
"""

import logging

from minitracker.core.errors import Conflict, NotFound, ValidationError
from minitracker.db.models.miniature import Miniature
from minitracker.db.repositories.catalog_repository import FactionRepository, UnitTypeRepository
from minitracker.db.repositories.miniature_repository import MiniatureRepository
from minitracker.schemas.miniature import (
    CatalogRef,
    MiniatureCreate,
    MiniatureDetail,
    MiniaturePage,
    MiniatureSummary,
    MiniatureUpdate,
)

logger = logging.getLogger(__name__)


def _summary(row) -> MiniatureSummary:
    miniature, faction_name, unit_type_name = row
    return MiniatureSummary(
        id=miniature.id,
        name=miniature.name,
        faction_id=miniature.faction_id,
        faction_name=faction_name,
        unit_type_id=miniature.unit_type_id,
        unit_type_name=unit_type_name,
        points_value=miniature.points_value,
        base_size=miniature.base_size,
        description=miniature.description,
        created_at=miniature.created_at,
    )


def _detail(row) -> MiniatureDetail:
    miniature, faction_name, unit_type_name = row
    return MiniatureDetail(
        id=miniature.id,
        name=miniature.name,
        faction=CatalogRef(id=miniature.faction_id, name=faction_name) if miniature.faction_id else None,
        unit_type=(
            CatalogRef(id=miniature.unit_type_id, name=unit_type_name) if miniature.unit_type_id else None
        ),
        points_value=miniature.points_value,
        base_size=miniature.base_size,
        description=miniature.description,
        created_at=miniature.created_at,
    )


class MiniatureService:
    def __init__(
        self,
        miniature_repo: MiniatureRepository,
        faction_repo: FactionRepository,
        unit_type_repo: UnitTypeRepository,
    ):
        self.miniature_repo = miniature_repo
        self.faction_repo = faction_repo
        self.unit_type_repo = unit_type_repo

    async def search(
        self,
        *,
        faction_id: int | None = None,
        unit_type_id: int | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> MiniaturePage:
        rows, total = await self.miniature_repo.search(
            faction_id=faction_id,
            unit_type_id=unit_type_id,
            search=search,
            limit=limit,
            offset=offset,
        )
        return MiniaturePage(
            miniatures=[_summary(row) for row in rows],
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + len(rows) < total,
        )

    async def get(self, id: int) -> MiniatureDetail:
        row = await self.miniature_repo.get_detail(id)
        if row is None:
            raise NotFound("Miniature not found")
        return _detail(row)

    async def _check_references(self, fields: dict) -> None:
        faction_id = fields.get("faction_id")
        if faction_id is not None and await self.faction_repo.get_by_id(faction_id) is None:
            raise NotFound("Faction not found", field="factionId")
        unit_type_id = fields.get("unit_type_id")
        if unit_type_id is not None and await self.unit_type_repo.get_by_id(unit_type_id) is None:
            raise NotFound("Unit type not found", field="unitTypeId")

    async def create(self, data: MiniatureCreate) -> MiniatureDetail:
        fields = data.model_dump()
        await self._check_references(fields)
        fields["base_size"] = fields["base_size"] or None
        fields["description"] = fields["description"] or None
        miniature = await self.miniature_repo.add(Miniature(**fields))
        logger.info("Miniature %s created: %s", miniature.id, miniature.name)
        return await self.get(miniature.id)

    async def update(self, id: int, data: MiniatureUpdate) -> MiniatureDetail:
        miniature = await self.miniature_repo.get_by_id(id)
        if miniature is None:
            raise NotFound("Miniature not found")
        fields = data.model_dump(exclude_unset=True)
        if "name" in fields and fields["name"] is None:
            raise ValidationError("Miniature name cannot be empty", field="name")
        await self._check_references(fields)
        for key in ("base_size", "description"):
            if key in fields:
                fields[key] = fields[key] or None
        for key, value in fields.items():
            setattr(miniature, key, value)
        await self.miniature_repo.save(miniature)
        return await self.get(id)

    async def delete(self, id: int) -> None:
        miniature = await self.miniature_repo.get_by_id(id)
        if miniature is None:
            raise NotFound("Miniature not found")
        if await self.miniature_repo.is_in_use(id):
            raise Conflict("Cannot delete miniature that is in use by lists")
        await self.miniature_repo.delete(miniature)
        logger.info("Miniature %s deleted", id)
