"""Faction / unit type schemas. Both catalogs share one shape."""

from typing import Annotated

from pydantic import StringConstraints

from minitracker.schemas.common import CamelModel

CatalogName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CatalogCreate(CamelModel):
    name: CatalogName
    description: str | None = None


class CatalogUpdate(CamelModel):
    name: CatalogName | None = None
    description: str | None = None


class CatalogResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
