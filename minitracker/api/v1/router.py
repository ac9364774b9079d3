"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from minitracker.api.v1.endpoints import auth, health, list_items, lists, metadata, miniatures, users
from minitracker.api.v1.endpoints.catalog import factions_router, unit_types_router

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(factions_router, prefix="/factions", tags=["factions"])
api_router.include_router(unit_types_router, prefix="/unit-types", tags=["unit-types"])
api_router.include_router(miniatures.router, prefix="/miniatures", tags=["miniatures"])
api_router.include_router(lists.router, prefix="/lists", tags=["lists"])
api_router.include_router(list_items.router, prefix="/list-items", tags=["list-items"])
api_router.include_router(metadata.router, prefix="/metadata", tags=["metadata"])
