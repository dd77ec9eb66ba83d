"""
Tests for token handling, password hashing and the route guards.
"""

from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import JWTError

from app.core.deps import ensure_admin, ensure_correct_user_or_admin, ensure_logged_in, get_current_user
from app.core.exceptions import UnauthorizedError
from app.core.security import create_access_token, decode_token, get_password_hash, verify_password


def bearer(token):
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestTokens:

    def test_round_trip_claims(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["username"] == "u1"
        assert payload["isAdmin"] is True
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))
        with pytest.raises(JWTError):
            decode_token(token)


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = get_password_hash("password1")

        assert hashed != "password1"
        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)


class TestGuards:

    def test_current_user_anonymous(self):
        assert get_current_user(None) is None

    def test_current_user_invalid_token(self):
        assert get_current_user(bearer("garbage")) is None

    def test_current_user_valid_token(self):
        claims = get_current_user(bearer(create_access_token("u1")))
        assert claims["username"] == "u1"

    def test_ensure_logged_in(self):
        assert ensure_logged_in({"username": "u1", "isAdmin": False})["username"] == "u1"
        with pytest.raises(UnauthorizedError):
            ensure_logged_in(None)

    def test_ensure_admin(self):
        assert ensure_admin({"username": "admin", "isAdmin": True})
        with pytest.raises(UnauthorizedError):
            ensure_admin({"username": "u1", "isAdmin": False})
        with pytest.raises(UnauthorizedError):
            ensure_admin(None)

    def test_ensure_correct_user_or_admin(self):
        assert ensure_correct_user_or_admin("u1", {"username": "u1", "isAdmin": False})
        assert ensure_correct_user_or_admin("u1", {"username": "admin", "isAdmin": True})
        with pytest.raises(UnauthorizedError):
            ensure_correct_user_or_admin("u1", {"username": "u2", "isAdmin": False})
        with pytest.raises(UnauthorizedError):
            ensure_correct_user_or_admin("u1", None)
