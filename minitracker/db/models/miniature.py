"""
Miniature model - catalog entry that list items point at.
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from minitracker.db.base import Base, utcnow


class Miniature(Base):
    """Catalog miniature. Faction and unit type are optional references."""

    __tablename__ = "miniatures"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    faction_id: Mapped[int | None] = mapped_column(ForeignKey("factions.id"), nullable=True, index=True)
    unit_type_id: Mapped[int | None] = mapped_column(ForeignKey("unit_types.id"), nullable=True, index=True)
    points_value: Mapped[int | None] = mapped_column(nullable=True)
    base_size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Miniature(id={self.id}, name={self.name})>"
