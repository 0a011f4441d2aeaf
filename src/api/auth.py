"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentUser, get_auth_service, verify_api_key
from src.schemas.auth import (
    SessionRequest,
    SessionResponse,
    SessionStatus,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.common import Envelope, success
from src.services.auth import AuthService

router = APIRouter(prefix="/api/v1", tags=["auth"], dependencies=[Depends(verify_api_key)])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register", response_model=Envelope[UserResponse], status_code=status.HTTP_201_CREATED
)
def register(user_data: UserRegister, auth_service: AuthServiceDep):
    """Register a new user."""
    user = auth_service.register(
        user_data.name,
        user_data.email,
        user_data.username,
        user_data.role,
        user_data.password,
    )
    return success("Registered successfully", user, status.HTTP_201_CREATED)


@router.post("/login", response_model=Envelope[SessionResponse])
def login(credentials: UserLogin, auth_service: AuthServiceDep):
    """Login with email or username and open a session."""
    session = auth_service.login(credentials.email_or_username, credentials.password)
    return success("Logged in successfully", {"session_id": session.id})


@router.post("/logout", response_model=Envelope[SessionStatus])
def logout(body: SessionRequest, auth_service: AuthServiceDep):
    """Close a session. Closing an unknown session also succeeds."""
    auth_service.logout(body.session_id)
    return success("Logged out successfully", {"status": "logged out"})


@router.post("/session", response_model=Envelope[SessionStatus])
def check_session(body: SessionRequest, auth_service: AuthServiceDep):
    """Check whether a session id is still valid."""
    return success("Session is valid", {"status": auth_service.check_session(body.session_id)})


@router.get("/me", response_model=Envelope[UserResponse])
def get_me(current_user: CurrentUser):
    """Get current user information."""
    return success("Get current user successfully", current_user)
