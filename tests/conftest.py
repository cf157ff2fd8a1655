"""Pytest configuration and fixtures."""

import os

# Configure the application before any fixit module reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from fixit.database import Base  # noqa: E402
from fixit.schemas.user import UserInput  # noqa: E402
from fixit.services.normalization import prepare_user  # noqa: E402
from fixit.services.user_service import UserService  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from fixit import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def user_service(db):
    """User service bound to the test session."""
    return UserService(db)


def build_user_input(suffix: str = "1", **overrides) -> UserInput:
    """Build a complete, valid user input with unique identifying fields."""
    fields = {
        "username": f"fundi{suffix}",
        "email": f"fundi{suffix}@example.com",
        "phone": f"+2547000000{suffix}",
        "specialisation": "Plumbing",
        "latitude": -1.2921,
        "longitude": 36.8219,
        "address": "Moi Avenue",
        "region": "Nairobi",
        "country": "Kenya",
        "password": "secret123",
    }
    fields.update(overrides)
    return UserInput(**fields)


@pytest.fixture
def make_user_input():
    """Factory for complete, valid user inputs."""
    return build_user_input


@pytest.fixture
def user_input():
    """A prepared, valid user input."""
    return prepare_user(build_user_input())
