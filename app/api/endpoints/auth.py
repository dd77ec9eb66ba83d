"""
Authentication endpoints.

Implements JWT-based stateless authentication:
- POST /token: Exchange username/password for a JWT
- POST /register: Create a (non-admin) account and receive a JWT
- GET /me: Get current user profile
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_logged_in
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(request: UserLoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate user and return a JWT.

    The token carries { username, isAdmin } for the route guards.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    logger.info(f"User logged in: {user['username']}")
    return TokenResponse(token=create_access_token(user["username"], user["isAdmin"]))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Returns a JWT for immediate login.
    """
    user = user_crud.register(db, request)
    logger.info(f"New user registered: {user['username']}")
    return TokenResponse(token=create_access_token(user["username"], user["isAdmin"]))


@router.get("/me")
def read_me(current_user: dict = Depends(ensure_logged_in), db: Session = Depends(get_db)):
    """Get the profile of the token's user."""
    return {"user": user_crud.get(db, current_user["username"])}
