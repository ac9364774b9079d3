"""
User endpoints - own profile read/update, admin user listing.
"""

import logging

from fastapi import APIRouter, Query

from minitracker.config import get_settings
from minitracker.core.dependencies import AdminIdentity, CurrentIdentity
from minitracker.core.errors import Conflict, NotFound, Unauthorized, ValidationError
from minitracker.core.security import hash_password, verify_password
from minitracker.db.repositories.user_repository import UserRepository
from minitracker.db.session import DbSession
from minitracker.schemas.common import Envelope, MessageData, ok
from minitracker.schemas.user import ProfileUpdate, UserResponse

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.get("", response_model=Envelope[list[UserResponse]])
async def list_users(
    session: DbSession,
    identity: AdminIdentity,
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.max_page_size, ge=1, le=settings.max_page_size),
):
    """All users (admin only)."""
    users = await UserRepository(session).get_many(skip=skip, limit=limit)
    return ok([UserResponse.model_validate(u) for u in users])


@router.get("/me", response_model=Envelope[UserResponse])
async def get_me(session: DbSession, identity: CurrentIdentity):
    user = await UserRepository(session).get_by_id(identity.user_id)
    if not user:
        raise NotFound("User not found")
    return ok(UserResponse.model_validate(user))


@router.put("/me", response_model=Envelope[MessageData])
async def update_me(session: DbSession, identity: CurrentIdentity, data: ProfileUpdate):
    """Change email and/or password. A new password requires the current one."""
    if not data.email and not data.password:
        raise ValidationError("At least one field (email or password) is required")
    if data.password and not data.current_password:
        raise ValidationError(
            "Current password is required to change password", field="currentPassword"
        )

    repo = UserRepository(session)
    user = await repo.get_by_id(identity.user_id)
    if not user:
        raise NotFound("User not found")

    if data.password and not verify_password(data.current_password, user.password_hash):
        raise Unauthorized(
            "Current password is incorrect", field="currentPassword", code="INVALID_CREDENTIALS"
        )
    if data.email:
        existing = await repo.get_by_email(data.email)
        if existing and existing.id != user.id:
            raise Conflict("Email already in use", field="email", code="DUPLICATE_ENTRY")

    # All checks passed; apply both changes together
    if data.password:
        user.password_hash = hash_password(data.password)
    if data.email:
        user.email = data.email

    await repo.save(user)
    logger.info("User %s updated profile", user.id)
    return ok(MessageData(message="Profile updated successfully"))
