"""Shared fixtures for the role management tests."""

from __future__ import annotations

import os
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC-05:00")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rolemgmt.infrastructure import models
from rolemgmt.infrastructure.database import Base, get_db


@pytest.fixture()
def engine():
    """Return an isolated in-memory database with the schema created."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory):
    """Return a test client whose requests use the isolated database."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client


def _add_user(
    session: Session,
    username: str,
    *,
    active: str = "Y",
    role_ids: tuple[int, ...] = (),
) -> int:
    """Insert a user and assign it to ``role_ids``; return the new user id."""

    user = models.UserModel(
        username=username,
        email=f"{username}@example.com",
        password_hash="not-a-real-hash",
        first_name=username.title(),
        last_name="Tester",
        active=active,
    )
    session.add(user)
    session.flush()
    for role_id in role_ids:
        session.execute(
            models.user_roles_table.insert().values(user_id=user.user_id, role_id=role_id)
        )
    session.commit()
    return user.user_id


@pytest.fixture()
def add_user(session):
    """Return a helper inserting users (and their role assignments) into ``session``."""

    def _factory(username: str, **kwargs) -> int:
        return _add_user(session, username, **kwargs)

    return _factory
