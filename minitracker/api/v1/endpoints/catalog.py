"""
Faction and unit type endpoints - public reads, admin writes.
Both routers are built by one factory because the resources are identical in shape.
"""

from collections.abc import Callable

from fastapi import APIRouter, status

from minitracker.core.dependencies import AdminIdentity
from minitracker.db.repositories.catalog_repository import FactionRepository, UnitTypeRepository
from minitracker.db.session import DbSession
from minitracker.schemas.catalog import CatalogCreate, CatalogResponse, CatalogUpdate
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.services.catalog_service import CatalogService


def build_catalog_router(repo_cls: Callable, label: str) -> APIRouter:
    router = APIRouter()

    def _service(session) -> CatalogService:
        return CatalogService(repo_cls(session), label)

    @router.get("", response_model=Envelope[list[CatalogResponse]])
    async def list_entries(session: DbSession):
        return ok(await _service(session).list_all())

    @router.get("/{entry_id}", response_model=Envelope[CatalogResponse])
    async def get_entry(session: DbSession, entry_id: int):
        return ok(await _service(session).get(entry_id))

    @router.post("", response_model=Envelope[CatalogResponse], status_code=status.HTTP_201_CREATED)
    async def create_entry(session: DbSession, identity: AdminIdentity, data: CatalogCreate):
        return ok(await _service(session).create(data))

    @router.put("/{entry_id}", response_model=Envelope[CatalogResponse])
    async def update_entry(session: DbSession, identity: AdminIdentity, entry_id: int, data: CatalogUpdate):
        return ok(await _service(session).update(entry_id, data), message=f"{label} updated successfully")

    @router.delete("/{entry_id}", response_model=Envelope[MessageData])
    async def delete_entry(session: DbSession, identity: AdminIdentity, entry_id: int):
        await _service(session).delete(entry_id)
        return ok(MessageData(message=f"{label} deleted successfully"))

    return router


factions_router = build_catalog_router(FactionRepository, "Faction")
unit_types_router = build_catalog_router(UnitTypeRepository, "Unit type")
