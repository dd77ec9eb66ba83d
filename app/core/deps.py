"""
FastAPI dependencies for authentication, authorization and query filters.

The bearer token is optional on every request: a missing or invalid token
means an anonymous caller. The ensure_* guards turn that into a 401.
"""

import logging
from typing import Callable, Optional, Type, TypeVar
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import BaseModel, ValidationError

from app.core.exceptions import BadRequestError, UnauthorizedError, format_validation_errors
from app.core.security import decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)

FiltersT = TypeVar("FiltersT", bound=BaseModel)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Return the token claims ({"username", "isAdmin"}) or None.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        logger.debug("Ignoring invalid bearer token")
        return None

    if payload.get("username") is None:
        return None
    return payload


def ensure_logged_in(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """
    Require any authenticated user.

    Raises:
        UnauthorizedError: If no valid token was supplied
    """
    if not user:
        raise UnauthorizedError()
    return user


def ensure_admin(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """
    Require an authenticated admin.

    Raises:
        UnauthorizedError: If the caller is anonymous or not an admin
    """
    if not user or not user.get("isAdmin"):
        raise UnauthorizedError()
    return user


def ensure_correct_user_or_admin(
    username: str,
    user: Optional[dict] = Depends(get_current_user),
) -> dict:
    """
    Require the user named in the path, or an admin.

    Raises:
        UnauthorizedError: Otherwise
    """
    if not user or not (user.get("isAdmin") or user.get("username") == username):
        raise UnauthorizedError()
    return user


def search_filters(model: Type[FiltersT]) -> Callable[[Request], FiltersT]:
    """
    Build a dependency that validates the query string against a filter model.

    Unknown keys and ill-typed values raise BadRequestError.

    Usage:
        @router.get("/")
        def list_jobs(filters: JobSearchFilters = Depends(search_filters(JobSearchFilters))):
            ...
    """
    def dependency(request: Request) -> FiltersT:
        try:
            return model.model_validate(dict(request.query_params))
        except ValidationError as exc:
            raise BadRequestError(format_validation_errors(exc.errors())) from exc

    return dependency
