"""Authentication service: registration, login and opaque session handling."""

import logging

from passlib.context import CryptContext
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import (
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
    store_errors,
)
from src.models.enums import Role
from src.models.user import User, UserSession

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class AuthService:
    """Registers users and maps opaque session ids to users."""

    def __init__(self, db: Session):
        self.db = db

    def find_user(self, email_or_username: str) -> User | None:
        """Look a user up by email or username."""
        with store_errors(self.db, "Error getting user from DB"):
            return (
                self.db.query(User)
                .filter(or_(User.email == email_or_username, User.username == email_or_username))
                .first()
            )

    def register(
        self, name: str, email: str, username: str, role: Role, password: str
    ) -> User:
        """Create a user. Email and username must both be unused."""
        with store_errors(self.db, "Error creating user in DB"):
            existing = (
                self.db.query(User.id)
                .filter(or_(User.email == email, User.username == username))
                .first()
            )
            if existing:
                raise ValidationError("User already registered")

            user = User(
                name=name,
                email=email,
                username=username,
                role=role,
                password_hash=get_password_hash(password),
                avatar="",
            )
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise ValidationError("User already registered") from None
            self.db.refresh(user)

        logger.info(f"Registered user {user.id} ({user.role.value})")
        return user

    def login(self, email_or_username: str, password: str) -> UserSession:
        """Check credentials and open a new session.

        A user may hold any number of sessions at once.
        """
        user = self.find_user(email_or_username)
        if not user:
            raise NotFoundError("User not found")

        if not verify_password(password, user.password_hash):
            logger.warning(f"Rejected login for user {user.id}: bad password")
            raise AuthorizationError("Invalid credentials")

        with store_errors(self.db, "Error creating session in DB"):
            session = UserSession(user_id=user.id)
            self.db.add(session)
            self.db.commit()
            self.db.refresh(session)

        logger.info(f"User {user.id} logged in")
        return session

    def logout(self, session_id: str) -> None:
        """Delete the session.

        An unknown session counts as logged out, and so does a session the
        store fails to delete.
        """
        try:
            with store_errors(self.db, "Error deleting session in DB"):
                session = self.db.get(UserSession, session_id)
                if session is None:
                    return
                user_id = session.user_id
                self.db.delete(session)
                self.db.commit()
        except StoreError:
            logger.warning("Session delete failed; treating the caller as logged out")
            return

        logger.info(f"User {user_id} logged out")

    def _get_session(self, session_id: str) -> UserSession:
        with store_errors(self.db, "Error getting session from DB"):
            session = self.db.get(UserSession, session_id)
        if session is None:
            raise AuthorizationError("Session invalid")
        return session

    def check_session(self, session_id: str) -> str:
        """Return "valid" if the session exists."""
        self._get_session(session_id)
        return "valid"

    def decode_session(self, session_id: str) -> User:
        """Resolve a session id to its user.

        A session whose user no longer exists is rejected like an unknown one.
        """
        session = self._get_session(session_id)
        with store_errors(self.db, "Error getting user from DB"):
            user = self.db.get(User, session.user_id)
        if user is None:
            logger.warning(f"Session refers to missing user {session.user_id}")
            raise AuthorizationError("Session invalid")
        return user
