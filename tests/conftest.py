# =============================================================================
# Payload API - Test Fixtures
# =============================================================================
"""
Shared fixtures.

Every test runs against its own SQLite file so rows never leak between
tests. Stored rows are read back through a synchronous engine.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from payload_api.config import get_settings
from payload_api.main import app
from payload_api.models import Payload
from payload_api.services import get_database, get_session


@pytest.fixture
def database_path(tmp_path):
    """Location of the per-test SQLite database file."""
    return tmp_path / "payloads.db"


@pytest.fixture
def client(database_path, monkeypatch):
    """Create test client bound to a fresh database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{database_path}")
    get_settings.cache_clear()
    get_database.cache_clear()
    
    # Context manager runs startup (table creation) and shutdown
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()
    get_settings.cache_clear()
    get_database.cache_clear()


@pytest.fixture
def stored_payloads(database_path):
    """Return a callable listing every persisted row, oldest first."""
    def _fetch() -> list[Payload]:
        engine = create_engine(f"sqlite:///{database_path}")
        try:
            with Session(engine) as session:
                return list(session.scalars(select(Payload).order_by(Payload.id)))
        finally:
            engine.dispose()
    
    return _fetch


@pytest.fixture
def failing_session():
    """
    Install a session whose commit raises, simulating an unavailable store.
    
    Returns the mock so tests can assert on staged rows.
    """
    session = MagicMock()
    session.commit = AsyncMock(side_effect=ConnectionError("database is unavailable"))
    
    async def _override():
        yield session
    
    app.dependency_overrides[get_session] = _override
    return session


@pytest.fixture
def dropped_schema(client):
    """Drop the payloads table on the live database so real commits fail."""
    client.portal.call(get_database().drop_all)
