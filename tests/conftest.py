import os
import tempfile

import pytest

# Settings are read at import time, point them at a throwaway database first
_TMP_DIR = tempfile.mkdtemp(prefix="resource-api-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_TMP_DIR, "test.sqlite")
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import SessionLocal  # noqa: E402
from app.main import app  # noqa: E402
from app.models.resource import Resource  # noqa: E402


@pytest.fixture(scope="session")
def client():
    # context manager runs the lifespan (table creation)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_resources(client):
    yield
    db = SessionLocal()
    try:
        db.query(Resource).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def db_session(client):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def create_resource(client):
    """Factory: POST a resource and return its JSON data"""

    def _create(**fields):
        payload = {"name": "Sample resource"}
        payload.update(fields)
        response = client.post("/api/resources", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
