"""
FastAPI dependencies - resolve the requester's Identity from the session cookie.
Routes receive an explicit Identity; services never look at the request.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from minitracker.config import get_settings
from minitracker.core.access import ANONYMOUS, Identity
from minitracker.core.errors import Forbidden, Unauthorized
from minitracker.core.security import decode_session_token
from minitracker.db.repositories.user_repository import UserRepository
from minitracker.db.session import DbSession

settings = get_settings()

session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)
# Non-browser clients may send the same token as a bearer header
bearer = HTTPBearer(auto_error=False)


async def get_identity(
    session: DbSession,
    cookie_token: Annotated[str | None, Depends(session_cookie)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
) -> Identity:
    """Identity of the caller, or ANONYMOUS when there is no valid session."""
    token = cookie_token or (credentials.credentials if credentials else None)
    if not token:
        return ANONYMOUS
    payload = decode_session_token(token)
    if not payload or "sub" not in payload:
        return ANONYMOUS
    user = await UserRepository(session).get_by_id(int(payload["sub"]))
    if not user:
        return ANONYMOUS
    return Identity(user_id=user.id, is_admin=user.is_admin)


OptionalIdentity = Annotated[Identity, Depends(get_identity)]


async def require_user(identity: OptionalIdentity) -> Identity:
    """Raises 401 when no session is present."""
    if not identity.is_authenticated:
        raise Unauthorized("Authentication required. Please log in.")
    return identity


CurrentIdentity = Annotated[Identity, Depends(require_user)]


async def require_admin(identity: CurrentIdentity) -> Identity:
    """Raises 401 without a session, 403 for non-admins."""
    if not identity.is_admin:
        raise Forbidden("Admin access required.")
    return identity


AdminIdentity = Annotated[Identity, Depends(require_admin)]
