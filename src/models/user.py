"""User and session models."""

import secrets

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import Role
from src.models.mixins import TimestampMixin


def generate_session_id() -> str:
    """Opaque, unguessable session identifier."""
    return secrets.token_urlsafe(32)


class User(Base, TimestampMixin):
    """User model for authentication and recipe ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(
        Enum(Role, native_enum=False, length=10), nullable=False, default=Role.USER
    )
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(1024), nullable=False, default="")


class UserSession(Base, TimestampMixin):
    """Login session. Valid until explicitly deleted."""

    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True, default=generate_session_id)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    user = relationship("User")
