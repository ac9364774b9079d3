"""
List models - a user's tracked collection, its items and per-item metadata.
Child rows cascade at the database level (ON DELETE CASCADE).
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from minitracker.core.statuses import AssemblyStatus, PaintingStatus, enum_values
from minitracker.db.base import Base, utcnow


class List(Base):
    """Named collection owned by exactly one user. is_public grants read access to everyone."""

    __tablename__ = "lists"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(default=False, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<List(id={self.id}, name={self.name})>"


class ListItem(Base):
    """One miniature entry within a list, with quantity and progress."""

    __tablename__ = "list_items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    list_id: Mapped[int] = mapped_column(
        ForeignKey("lists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    miniature_id: Mapped[int] = mapped_column(
        ForeignKey("miniatures.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(nullable=False, default=1)
    assembly_status: Mapped[AssemblyStatus] = mapped_column(
        Enum(
            AssemblyStatus,
            name="assembly_status",
            native_enum=False,
            values_callable=enum_values,
            length=20,
        ),
        nullable=False,
        default=AssemblyStatus.NOT_STARTED,
    )
    painting_status: Mapped[PaintingStatus] = mapped_column(
        Enum(
            PaintingStatus,
            name="painting_status",
            native_enum=False,
            values_callable=enum_values,
            length=20,
        ),
        nullable=False,
        default=PaintingStatus.UNPAINTED,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<ListItem(id={self.id}, list_id={self.list_id}, miniature_id={self.miniature_id})>"


class Metadata(Base):
    """Optional extended notes for a list item. At most one row per item (enforced by upsert)."""

    __tablename__ = "metadata"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    list_item_id: Mapped[int] = mapped_column(
        ForeignKey("list_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    paint_colors: Mapped[str | None] = mapped_column(Text, nullable=True)
    techniques: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    cost: Mapped[float | None] = mapped_column(nullable=True)
    storage_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Metadata(id={self.id}, list_item_id={self.list_item_id})>"
