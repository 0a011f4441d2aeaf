"""Application error types and store error wrapping."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for errors that map to a fixed HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "APPLICATION_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApplicationError):
    """Request is well-formed but violates a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class AuthorizationError(ApplicationError):
    """Bad credentials, missing or invalid session, or insufficient role."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTHORIZATION_ERROR"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOTFOUND_ERROR"


class StoreError(ApplicationError):
    """Underlying persistence failure. The message is always generic."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "DB_ERROR"


@contextmanager
def store_errors(db: Session, message: str) -> Iterator[None]:
    """Roll back and re-raise any SQLAlchemy failure as a StoreError.

    The original exception is only logged; clients see `message`. Domain
    errors raised inside the block also roll back pending changes.
    """
    try:
        yield
    except ApplicationError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"{message}: {e.__class__.__name__}")
        raise StoreError(message) from e
