"""
User management endpoints.

Admins manage every account; a regular user may read, update and delete
only their own.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, ensure_correct_user_or_admin
from app.core.exceptions import UnauthorizedError
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import UserCreateRequest, UserUpdateRequest

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201)
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Add a user, possibly an admin. This is not the registration endpoint.

    Returns { user, token }

    Authorization required: admin
    """
    user = user_crud.register(db, request, is_admin=request.is_admin)
    logger.info(f"Admin {admin_user['username']} created user {user['username']}")
    return {"user": user, "token": create_access_token(user["username"], user["isAdmin"])}


@router.get("/")
def list_users(
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """List all users ordered by username."""
    return {"users": user_crud.find_all(db)}


@router.get("/{username}")
def get_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(ensure_correct_user_or_admin)
):
    return {"user": user_crud.get(db, username)}


@router.patch("/{username}")
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    current_user: dict = Depends(ensure_correct_user_or_admin)
):
    """
    Partially update a user.

    Fields can be: { firstName, lastName, password, email, isAdmin }
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    # Only admins can grant or revoke admin rights
    if "isAdmin" in data and not current_user.get("isAdmin"):
        raise UnauthorizedError()
    if "email" in data:
        data["email"] = str(data["email"])

    user = user_crud.update(db, username, data)
    logger.info(f"User {username} updated by {current_user['username']}")
    return {"user": user}


@router.delete("/{username}")
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(ensure_correct_user_or_admin)
):
    user_crud.remove(db, username)
    logger.info(f"User {username} deleted by {current_user['username']}")
    return {"deleted": username}
