"""
User repository - credential store lookups and existence checks.
"""

from sqlalchemy import select

from minitracker.db.models.user import User
from minitracker.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with lookups used by auth."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> User | None:
        """Find user by username - used for login."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        return await self.count_where(User.username == username) > 0

    async def email_exists(self, email: str) -> bool:
        return await self.count_where(User.email == email) > 0
