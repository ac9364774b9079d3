"""
Auth endpoints - registration, login/logout with a session cookie, session check.
"""

import logging

from fastapi import APIRouter, Response, status

from minitracker.config import get_settings
from minitracker.core.dependencies import OptionalIdentity
from minitracker.core.errors import Conflict, Unauthorized, ValidationError
from minitracker.core.security import create_session_token, hash_password, verify_password
from minitracker.db.models.user import User
from minitracker.db.repositories.user_repository import UserRepository
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.schemas.user import (
    AuthStatus,
    LoginRequest,
    RegisterRequest,
    RegisterResult,
    SessionUser,
    UserResponse,
)

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=Envelope[RegisterResult], status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create a regular (non-admin) user."""
    if data.password != data.confirm_password:
        raise ValidationError("Passwords do not match.", field="confirmPassword")
    repo = UserRepository(session)
    if await repo.username_exists(data.username):
        raise Conflict("Username already taken.", field="username", code="DUPLICATE_ENTRY")
    if await repo.email_exists(data.email):
        raise Conflict("Email already registered.", field="email", code="DUPLICATE_ENTRY")
    user = await repo.add(
        User(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
            is_admin=False,
        )
    )
    logger.info("User %s registered: %s", user.id, user.username)
    return ok(RegisterResult(user_id=user.id), message="User registered successfully")


@router.post("/login", response_model=Envelope[dict[str, UserResponse]])
async def login(session: DbSession, data: LoginRequest, response: Response):
    """Verify credentials and set the session cookie."""
    user = await UserRepository(session).get_by_username(data.username)
    if not user or not verify_password(data.password, user.password_hash):
        raise Unauthorized("Invalid username or password", code="INVALID_CREDENTIALS")
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(user.id),
        max_age=settings.session_max_age_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return ok({"user": UserResponse.model_validate(user)})


@router.post("/logout", response_model=Envelope[MessageData])
async def logout(response: Response):
    response.delete_cookie(settings.session_cookie_name)
    return ok(MessageData(message="Logged out successfully"))


@router.get("/check", response_model=Envelope[AuthStatus])
async def check(session: DbSession, identity: OptionalIdentity):
    """Whether the caller holds a valid session."""
    if identity.is_authenticated:
        user = await UserRepository(session).get_by_id(identity.user_id)
        return ok(AuthStatus(authenticated=True, user=SessionUser.model_validate(user)))
    return ok(AuthStatus(authenticated=False))
