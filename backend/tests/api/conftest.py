"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from atlas.main import app
from atlas.core.database import Base, get_db
import atlas.models  # noqa: F401


@pytest.fixture
def client(tmp_path):
    """Create a test client backed by a fresh SQLite file per test."""
    db_file = tmp_path / "atlas.db"

    sync_engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    # NullPool: the client runs requests on its own event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def get_test_db():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db

    yield TestClient(app)

    # Clean up
    app.dependency_overrides = {}


@pytest.fixture
def create_algorithm(client):
    """Factory posting an algorithm and returning its JSON body."""

    def _create(name="alg1", computation_model="CLASSIC", **fields):
        response = client.post(
            "/atlas/algorithms",
            json={"name": name, "computation_model": computation_model, **fields},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
