"""Shared fixtures: a throw-away SQLite database and an API client bound to it."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "template_kit_catalog_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.application.use_cases.template_kits import create_template_kit  # noqa: E402
from app.domain.entities import TemplateKit  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


@pytest.fixture()
def database() -> Iterator[None]:
    """Provide empty tables for the duration of a test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(database):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(database):
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_kit(database) -> Callable[..., TemplateKit]:
    """Insert a kit straight through the create use case."""

    def _make_kit(name: str = "Sample Kit", **fields) -> TemplateKit:
        with SessionLocal() as session:
            return create_template_kit(session, name=name, **fields)

    return _make_kit


@pytest.fixture()
def auth_headers(client) -> dict[str, str]:
    """Register a user and return bearer headers for it."""

    response = client.post(
        "/register",
        json={
            "name": "Catalog Admin",
            "email": "admin@example.com",
            "password": "Secret123",
        },
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
