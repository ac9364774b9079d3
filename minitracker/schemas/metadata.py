"""List item metadata schemas."""

import re
from datetime import date

from pydantic import Field, field_validator

from minitracker.schemas.common import CamelModel, OptionalText

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class MetadataUpsert(CamelModel):
    """Create-or-update body. On update only the fields present are written."""

    paint_colors: OptionalText = None
    techniques: OptionalText = None
    purchase_date: date | None = None
    cost: float | None = Field(None, ge=0)
    storage_location: OptionalText = None
    custom_notes: OptionalText = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _iso_date_only(cls, value):
        if value is None or value == "":
            return None
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not _ISO_DATE.match(value):
            raise ValueError("Invalid date format. Use YYYY-MM-DD")
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise ValueError("Invalid date format. Use YYYY-MM-DD") from None


class MetadataResponse(CamelModel):
    id: int
    list_item_id: int
    paint_colors: str | None = None
    techniques: str | None = None
    purchase_date: date | None = None
    cost: float | None = None
    storage_location: str | None = None
    custom_notes: str | None = None
