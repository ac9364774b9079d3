"""List, list item and statistics schemas - REST API contract."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from minitracker.core.statuses import AssemblyStatus, PaintingStatus
from minitracker.schemas.common import CamelModel, OptionalText

# JSON integers only: true or "3" are rejected rather than coerced
Quantity = Annotated[int, Field(strict=True, ge=1)]

ListName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class ListCreate(CamelModel):
    name: ListName
    description: OptionalText = None
    is_public: bool = False


class ListUpdate(CamelModel):
    """Partial update: only fields present in the body are written."""

    name: ListName | None = None
    description: OptionalText = None
    is_public: bool | None = None


class ListResponse(CamelModel):
    id: int
    user_id: int
    name: str
    description: str | None = None
    is_public: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListSummary(ListResponse):
    item_count: int = 0


class PublicListSummary(ListSummary):
    username: str


class ListPage(CamelModel):
    lists: list[PublicListSummary]
    total: int
    limit: int
    offset: int
    has_more: bool


class ListWithOwner(ListResponse):
    username: str


class ListItemCreate(CamelModel):
    miniature_id: int
    quantity: Quantity = 1
    assembly_status: AssemblyStatus = AssemblyStatus.NOT_STARTED
    painting_status: PaintingStatus = PaintingStatus.UNPAINTED
    notes: OptionalText = None


class ListItemUpdate(CamelModel):
    """Partial update: only fields present in the body are written."""

    quantity: Quantity | None = None
    assembly_status: AssemblyStatus | None = None
    painting_status: PaintingStatus | None = None
    notes: OptionalText = None


class ListItemResponse(CamelModel):
    id: int
    list_id: int
    miniature_id: int
    quantity: int
    assembly_status: AssemblyStatus
    painting_status: PaintingStatus
    notes: str | None = None
    added_at: datetime | None = None


class ListItemDetail(CamelModel):
    """List item joined with its miniature's catalog names and points value."""

    id: int
    miniature_id: int
    miniature_name: str
    faction_name: str | None = None
    unit_type_name: str | None = None
    points_value: int | None = None
    quantity: int
    assembly_status: AssemblyStatus
    painting_status: PaintingStatus
    notes: str | None = None
    added_at: datetime | None = None


class ListStatistics(CamelModel):
    total_items: int
    total_points: int
    # Keys are the canonical status strings, e.g. "Not Started"
    assembly_progress: dict[str, int]
    painting_progress: dict[str, int]


class ListDetail(CamelModel):
    list: ListWithOwner
    items: list[ListItemDetail]
    statistics: ListStatistics
