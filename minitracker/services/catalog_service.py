"""
Catalog service - factions and unit types (admin-managed reference data).
One class serves both tables; `label` only changes the wording of messages.
"""

import logging

from minitracker.core.errors import Conflict, NotFound, ValidationError
from minitracker.db.repositories.catalog_repository import NamedCatalogRepository
from minitracker.schemas.catalog import CatalogCreate, CatalogResponse, CatalogUpdate

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, repo: NamedCatalogRepository, label: str):
        self.repo = repo
        self.label = label

    async def list_all(self) -> list[CatalogResponse]:
        return [CatalogResponse.model_validate(row) for row in await self.repo.get_all()]

    async def _get_or_404(self, id: int):
        row = await self.repo.get_by_id(id)
        if row is None:
            raise NotFound(f"{self.label} not found")
        return row

    async def get(self, id: int) -> CatalogResponse:
        return CatalogResponse.model_validate(await self._get_or_404(id))

    async def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        existing = await self.repo.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise Conflict(f"{self.label} name already exists", field="name", code="DUPLICATE_ENTRY")

    async def create(self, data: CatalogCreate) -> CatalogResponse:
        await self._ensure_name_free(data.name)
        row = await self.repo.add(self.repo.model(name=data.name, description=data.description or None))
        logger.info("%s %s created: %s", self.label, row.id, row.name)
        return CatalogResponse.model_validate(row)

    async def update(self, id: int, data: CatalogUpdate) -> CatalogResponse:
        row = await self._get_or_404(id)
        fields = data.model_dump(exclude_unset=True)
        if "name" in fields:
            if fields["name"] is None:
                raise ValidationError(f"{self.label} name cannot be empty", field="name")
            await self._ensure_name_free(fields["name"], exclude_id=row.id)
        if "description" in fields:
            fields["description"] = fields["description"] or None
        for key, value in fields.items():
            setattr(row, key, value)
        row = await self.repo.save(row)
        return CatalogResponse.model_validate(row)

    async def delete(self, id: int) -> None:
        row = await self._get_or_404(id)
        if await self.repo.is_in_use(row.id):
            raise Conflict(f"Cannot delete {self.label.lower()} that is in use by miniatures")
        await self.repo.delete(row)
        logger.info("%s %s deleted", self.label, id)
