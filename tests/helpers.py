"""Shared fixtures: the FastAPI app wired to an in-memory SQLite database."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base

DEFAULT_PASSWORD = "secret1"


def make_engine():
    """In-memory SQLite shared across threads, with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(engine)
    return engine


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test; self.SessionTesting builds sessions on it."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def tearDown(self) -> None:
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test engine."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def sign_up(
        self,
        name: str = "Alice Smith",
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
        country: str = "US",
    ) -> tuple[str, int]:
        """Register a user through the API; return (token, user id)."""
        res = self.client.post(
            "/api/v1/auth/sign-up",
            json={"name": name, "email": email, "password": password, "country": country},
        )
        self.assertEqual(res.status_code, 201, res.text)
        body = res.json()
        return body["token"], body["data"]["id"]

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def create_project(self, token: str, title: str = "Website", description: str = "Relaunch") -> dict:
        res = self.client.post(
            "/api/v1/projects/create-project",
            json={"title": title, "description": description},
            headers=self.auth(token),
        )
        self.assertEqual(res.status_code, 201, res.text)
        return res.json()["data"]

    def create_task(self, token: str, project_id: int, **fields: object) -> dict:
        body = {"title": "Write copy", "description": "Landing page text", "projectId": project_id}
        body.update(fields)
        res = self.client.post(
            "/api/v1/tasks/create-task", json=body, headers=self.auth(token)
        )
        self.assertEqual(res.status_code, 201, res.text)
        return res.json()["data"]
