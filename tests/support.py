"""Shared helpers: in-memory SQLite sessions and an API test case with get_db overridden."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sensorhub.core.database import get_db
from sensorhub.core.security import create_access_token, hash_password
from sensorhub.main import app
from sensorhub.models import Base
from sensorhub.services.credential_store import CredentialStore


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with all tables; one shared connection across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """TestClient against the real app with an isolated database per test."""

    def setUp(self) -> None:
        self.SessionLocal = make_session_factory()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def create_user(self, username: str, password: str, role: str) -> int:
        db = self.SessionLocal()
        try:
            return CredentialStore(db).create_user(username, hash_password(password), role).id
        finally:
            db.close()

    def token_for(self, role: str, user_id: int = 1) -> str:
        return create_access_token(user_id, role)
