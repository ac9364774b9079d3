"""User and auth request/response schemas - API contract and validation."""

from datetime import datetime

from pydantic import EmailStr, Field

from minitracker.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    # bcrypt accepts max 72 bytes; longer passwords cause 500. Validate here for a clear 400.
    password: str = Field(..., min_length=8, max_length=72)
    confirm_password: str = Field(..., min_length=1, max_length=72)


class RegisterResult(CamelModel):
    user_id: int


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    is_admin: bool
    created_at: datetime | None = None


class SessionUser(CamelModel):
    id: int
    username: str
    is_admin: bool


class AuthStatus(CamelModel):
    authenticated: bool
    user: SessionUser | None = None


class ProfileUpdate(CamelModel):
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8, max_length=72)
    current_password: str | None = None
