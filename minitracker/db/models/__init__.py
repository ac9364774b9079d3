# ORM models; importing this package registers every table on Base.metadata

from minitracker.db.models.catalog import Faction, UnitType
from minitracker.db.models.list import List, ListItem, Metadata
from minitracker.db.models.miniature import Miniature
from minitracker.db.models.user import User

__all__ = ["User", "Faction", "UnitType", "Miniature", "List", "ListItem", "Metadata"]
