"""Authentication schemas."""

from pydantic import EmailStr, Field

from src.models.enums import Role
from src.schemas.common import CamelModel


class UserRegister(CamelModel):
    """User registration request."""

    name: str = Field(..., min_length=3, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    username: str = Field(..., min_length=4, max_length=255)
    role: Role = Role.USER
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(CamelModel):
    """User login request. Accepts either the email or the username."""

    email_or_username: str = Field(..., min_length=4, max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class SessionRequest(CamelModel):
    """Body of the logout and session-check endpoints."""

    session_id: str = Field(..., min_length=1, max_length=64)


class SessionResponse(CamelModel):
    """Login response carrying the opaque session id."""

    session_id: str


class SessionStatus(CamelModel):
    status: str


class UserResponse(CamelModel):
    """Public user information. Never includes the password hash."""

    id: int
    name: str
    email: str
    username: str
    role: Role
    avatar: str
