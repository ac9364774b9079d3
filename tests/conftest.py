"""
Pytest fixtures - test DB, client, users and catalog rows (TDD/BDD support).
Each test runs against a fresh in-memory SQLite database shared by the app and the fixtures.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from minitracker.config import get_settings
from minitracker.core.security import create_session_token, hash_password
from minitracker.db.base import Base
from minitracker.db.models import Faction, List, ListItem, Miniature, UnitType, User
from minitracker.db.session import enable_sqlite_foreign_keys, get_db
from minitracker.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"
PASSWORD = "password123"

settings = get_settings()


@pytest_asyncio.fixture
async def engine():
    # StaticPool keeps the single in-memory database alive across connections
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def make_user(session: AsyncSession, username: str, *, is_admin: bool = False) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password(PASSWORD),
        is_admin=is_admin,
    )
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


def session_headers(user: User) -> dict:
    """Request headers carrying the user's session cookie."""
    token = create_session_token(user.id)
    return {"Cookie": f"{settings.session_cookie_name}={token}"}


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    return await make_user(session, "collector")


@pytest_asyncio.fixture
async def other_user(session: AsyncSession) -> User:
    return await make_user(session, "rival")


@pytest_asyncio.fixture
async def admin_user(session: AsyncSession) -> User:
    return await make_user(session, "admin", is_admin=True)


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    return session_headers(test_user)


@pytest.fixture
def other_headers(other_user: User) -> dict:
    return session_headers(other_user)


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return session_headers(admin_user)


@pytest_asyncio.fixture
async def faction(session: AsyncSession) -> Faction:
    row = Faction(name="Space Marines", description="Power-armoured warriors")
    session.add(row)
    await session.flush()
    return row


@pytest_asyncio.fixture
async def unit_type(session: AsyncSession) -> UnitType:
    row = UnitType(name="Infantry")
    session.add(row)
    await session.flush()
    return row


@pytest_asyncio.fixture
async def miniatures(session: AsyncSession, faction: Faction, unit_type: UnitType) -> list[Miniature]:
    rows = [
        Miniature(name="Captain", faction_id=faction.id, unit_type_id=unit_type.id, points_value=100),
        Miniature(name="Intercessor Squad", faction_id=faction.id, unit_type_id=unit_type.id, points_value=80),
        Miniature(name="Objective Marker"),
    ]
    session.add_all(rows)
    await session.flush()
    return rows


@pytest_asyncio.fixture
async def private_list(session: AsyncSession, test_user: User) -> List:
    lst = List(user_id=test_user.id, name="Pile of Shame", is_public=False)
    session.add(lst)
    await session.flush()
    await session.refresh(lst)
    return lst


@pytest_asyncio.fixture
async def public_list(session: AsyncSession, test_user: User) -> List:
    lst = List(user_id=test_user.id, name="Display Army", description="Tournament list", is_public=True)
    session.add(lst)
    await session.flush()
    await session.refresh(lst)
    return lst


@pytest_asyncio.fixture
async def list_item(session: AsyncSession, public_list: List, miniatures: list[Miniature]) -> ListItem:
    item = ListItem(list_id=public_list.id, miniature_id=miniatures[0].id, quantity=2)
    session.add(item)
    await session.flush()
    await session.refresh(item)
    return item
