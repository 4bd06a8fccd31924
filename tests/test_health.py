from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from justmyluck.platform.db.session import get_db


def test_root_liveness(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_without_database(test_app):
    # No lifespan, so the table was never created for this client
    plain_client = TestClient(test_app)
    response = plain_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_with_broken_database(client, test_app):
    session = MagicMock(spec=AsyncSession)
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    async def broken_db():
        yield session

    test_app.dependency_overrides[get_db] = broken_db

    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
