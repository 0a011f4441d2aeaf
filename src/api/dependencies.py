"""FastAPI dependencies for the API key, authentication and services."""

import secrets
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.errors import AuthorizationError
from src.models.user import User
from src.schemas.common import ListParams, SortOption
from src.services.auth import AuthService
from src.services.favorite_service import FavoriteService
from src.services.instruction_service import InstructionService
from src.services.recipe_service import RecipeService
from src.services.reference_data import CategoryService, IngredientService

api_key_header = APIKeyHeader(name="api-key", auto_error=False)
security = HTTPBearer(auto_error=False)


def verify_api_key(api_key: Annotated[str | None, Depends(api_key_header)]) -> None:
    """Reject requests that do not carry the deployment's shared API key."""
    expected = get_settings().api_key
    if api_key is None or not secrets.compare_digest(api_key, expected):
        raise AuthorizationError("You are not allowed!")


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current user from the bearer session id."""
    if credentials is None or not credentials.credentials:
        raise AuthorizationError("Session id not provided")
    return auth_service.decode_session(credentials.credentials)


def require_admin(current_user: Annotated[User, Depends(get_current_user)]) -> User:
    """Get the current user, who must hold the ADMIN role."""
    if not current_user.role.is_admin():
        raise AuthorizationError("You are not allowed")
    return current_user


CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]


def get_list_params(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    sort: Annotated[str | None, Query()] = None,
    search: Annotated[str | None, Query(max_length=255)] = None,
) -> ListParams:
    """Listing query parameters. Unknown sort values fall back to a-z."""
    return ListParams(page=page, limit=limit, sort=SortOption.parse(sort), search=search or None)


def get_recipe_service(db: Annotated[Session, Depends(get_db)]) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_category_service(db: Annotated[Session, Depends(get_db)]) -> CategoryService:
    return CategoryService(db)


def get_ingredient_service(db: Annotated[Session, Depends(get_db)]) -> IngredientService:
    return IngredientService(db)


def get_instruction_service(db: Annotated[Session, Depends(get_db)]) -> InstructionService:
    return InstructionService(db)


def get_favorite_service(db: Annotated[Session, Depends(get_db)]) -> FavoriteService:
    return FavoriteService(db)
