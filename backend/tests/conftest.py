import os

# Configure before importing app modules: settings are read at import time.
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
# Minimum bcrypt cost keeps the suite fast; production default is 10.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.base import Base
from app.core.database import get_db
from app.core.security import TokenConfig, create_access_token, hash_password

# Import models so they register with SQLAlchemy metadata.
from app.models.user import User
from app.models.job import Job
from app.models.saved_job import SavedJob  # noqa: F401
from app.models.application import Application  # noqa: F401

TEST_PASSWORD = "test_password_123"


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests (StaticPool); reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def token_config():
    return TokenConfig(secret="test_jwt_secret", algorithm="HS256", expire_minutes=60)


@pytest.fixture()
def app(db_session, token_config):
    import app.main as main

    fastapi_app = main.app
    original_config = fastapi_app.state.token_config
    fastapi_app.state.token_config = token_config

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()
    fastapi_app.state.token_config = original_config


@pytest.fixture()
def client(app):
    """Anonymous client (no Authorization header)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def users(db_session):
    """
    An employee, a second employee and an employer for ownership / role tests.
    """
    employee = User(
        email="ann@example.com",
        name="Ann",
        password_hash=hash_password(TEST_PASSWORD),
        role="employee",
    )
    other = User(
        email="bob@example.com",
        name="Bob",
        password_hash=hash_password(TEST_PASSWORD),
        role="employee",
    )
    employer = User(
        email="hr@acme.example",
        name="Acme HR",
        password_hash=hash_password(TEST_PASSWORD),
        role="employer",
        company_name="Acme",
    )
    db_session.add_all([employee, other, employer])
    db_session.commit()
    for u in (employee, other, employer):
        db_session.refresh(u)
    return employee, other, employer


@pytest.fixture()
def jobs(db_session):
    job_1 = Job(id="job-1", title="Backend Engineer", company="Acme", location="Remote", is_remote=True)
    job_2 = Job(id="job-2", title="Data Analyst", company="Globex", location="Berlin")
    db_session.add_all([job_1, job_2])
    db_session.commit()
    return job_1, job_2


@pytest.fixture()
def auth_headers(token_config):
    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(token_config, subject_id=user.id, email=user.email, role=user.role)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def client_for(app, auth_headers):
    """
    Context manager to create a client authenticated as an arbitrary user.

    Usage:
        with client_for(user) as c:
            ...
    """

    @contextmanager
    def _client_for(user: User):
        with TestClient(app, headers=auth_headers(user)) as c:
            yield c

    return _client_for
