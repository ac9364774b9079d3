"""
Security: password hashing and signed session tokens.
The session token is a short JWT carried in an HTTP-only cookie; the server keeps no session table.
"""

from datetime import datetime, timezone, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from minitracker.config import get_settings

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """One-way hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)


def create_session_token(subject: str | int, extra: dict[str, Any] | None = None) -> str:
    """Signed token for an authenticated user. Subject is the user id."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.session_max_age_minutes)
    to_encode = {"sub": str(subject), "exp": expire}
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> dict[str, Any] | None:
    """Decode and validate token. Returns payload or None if invalid or expired."""
    try:
        return jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
