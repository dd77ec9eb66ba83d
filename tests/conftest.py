"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies, jobs and users
- FastAPI test client
- Bearer headers for a regular user and an admin
"""

import os
from decimal import Decimal

# Cheap hashes for the seeded users; must be set before app.core.security is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models import Company, Job, User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh, seeded database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()

    db.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    db.flush()
    db.add_all([
        Job(id=1, title="j1", salary=1000000, equity=Decimal("0.010"), company_handle="c1"),
        Job(id=2, title="j2", salary=1100000, equity=Decimal("0.005"), company_handle="c2"),
        Job(id=3, title="j3", salary=1200000, equity=Decimal("0"), company_handle="c3"),
    ])
    db.add_all([
        User(username="u1", password=get_password_hash("password1"), first_name="U1F",
             last_name="U1L", email="user1@user.com", is_admin=False),
        User(username="admin", password=get_password_hash("password2"), first_name="AdF",
             last_name="AdL", email="admin@user.com", is_admin=True),
    ])
    db.commit()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    """Bearer header for the regular user u1"""
    return {"Authorization": f"Bearer {create_access_token('u1', is_admin=False)}"}


@pytest.fixture
def admin_headers():
    """Bearer header for the admin user"""
    return {"Authorization": f"Bearer {create_access_token('admin', is_admin=True)}"}
