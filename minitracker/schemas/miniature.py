"""Miniature catalog schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from minitracker.schemas.common import CamelModel, OptionalText

MiniatureName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
BaseSize = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)] | None


class MiniatureCreate(CamelModel):
    name: MiniatureName
    faction_id: int | None = None
    unit_type_id: int | None = None
    points_value: int | None = Field(None, ge=0)
    base_size: BaseSize = None
    description: OptionalText = None


class MiniatureUpdate(CamelModel):
    name: MiniatureName | None = None
    faction_id: int | None = None
    unit_type_id: int | None = None
    points_value: int | None = Field(None, ge=0)
    base_size: BaseSize = None
    description: OptionalText = None


class MiniatureSummary(CamelModel):
    id: int
    name: str
    faction_id: int | None = None
    faction_name: str | None = None
    unit_type_id: int | None = None
    unit_type_name: str | None = None
    points_value: int | None = None
    base_size: str | None = None
    description: str | None = None
    created_at: datetime | None = None


class CatalogRef(CamelModel):
    id: int
    name: str


class MiniatureDetail(CamelModel):
    id: int
    name: str
    faction: CatalogRef | None = None
    unit_type: CatalogRef | None = None
    points_value: int | None = None
    base_size: str | None = None
    description: str | None = None
    created_at: datetime | None = None


class MiniaturePage(CamelModel):
    miniatures: list[MiniatureSummary]
    total: int
    limit: int
    offset: int
    has_more: bool
