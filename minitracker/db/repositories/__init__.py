# Repository pattern: all SQL lives here, services depend on these classes

from minitracker.db.repositories.catalog_repository import FactionRepository, UnitTypeRepository
from minitracker.db.repositories.list_repository import ListItemRepository, ListRepository, MetadataRepository
from minitracker.db.repositories.miniature_repository import MiniatureRepository
from minitracker.db.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "FactionRepository",
    "UnitTypeRepository",
    "MiniatureRepository",
    "ListRepository",
    "ListItemRepository",
    "MetadataRepository",
]
