"""
Base repository - generic CRUD interface shared by every table.
Queries live in repositories; services never build SQL themselves.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from minitracker.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch single entity by primary key."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_many(
        self,
        *,
        skip: int = 0,
        limit: int = 20,
    ) -> list[ModelType]:
        """Paginated list ordered by id."""
        result = await self.session.execute(
            select(self.model).offset(skip).limit(limit).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def count_where(self, *criteria) -> int:
        """COUNT(*) over this table with optional WHERE criteria."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model).where(*criteria)
        )
        return result.scalar_one()

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller's request scope commits."""
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(entity)
        return entity

    async def save(self, entity: ModelType) -> ModelType:
        """Flush pending attribute changes on an already tracked entity."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Remove entity from DB. Child rows go with it via ON DELETE CASCADE."""
        await self.session.delete(entity)
        await self.session.flush()
