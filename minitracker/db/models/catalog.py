"""
Reference catalog models: factions and unit types.
Both are a unique name plus an optional description.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from minitracker.db.base import Base


class Faction(Base):
    __tablename__ = "factions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Faction(id={self.id}, name={self.name})>"


class UnitType(Base):
    __tablename__ = "unit_types"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<UnitType(id={self.id}, name={self.name})>"
