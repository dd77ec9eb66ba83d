"""
Pydantic schemas for users and authentication.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegisterRequest(BaseModel):
    """Request schema for self-registration. New users are never admins."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=72)  # bcrypt limit
    first_name: str = Field(..., min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=30, alias="lastName")
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Admin-only user creation, which may grant admin rights."""
    is_admin: bool = Field(False, alias="isAdmin")


class UserUpdateRequest(BaseModel):
    """Partial user update. The username cannot be changed."""
    model_config = ConfigDict(extra="forbid")

    password: str = Field(None, min_length=5, max_length=72)
    first_name: str = Field(None, min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(None, min_length=1, max_length=30, alias="lastName")
    email: EmailStr = None
    is_admin: bool = Field(None, alias="isAdmin")


class UserLoginRequest(BaseModel):
    """Request schema for /auth/token."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str
