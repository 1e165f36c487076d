"""Database Session Manager — driver failures surface as DatabaseError.

Tests cover:
    - A constraint violation inside session() raises DatabaseError and rolls back
    - The failed session leaves earlier committed rows intact
    - get_db without init_db is a RuntimeError
    - A store failure behind a route is a generic 500
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from app.core.errors import DatabaseError
from app.infrastructure import database
from app.infrastructure.database import DatabaseSessionManager, get_db
from app.main import app
from app.models.topic import Topic


@pytest.fixture
async def file_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'news.db'}")
    yield manager
    await manager.dispose()


async def test_integrity_violation_is_database_error(file_manager):
    await file_manager.create_tables()
    async with file_manager.session() as db:
        db.add(Topic(slug="cats", description="Not dogs"))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with file_manager.session() as db:
            db.add(Topic(slug="cats", description="Duplicate"))
            await db.commit()
    assert exc_info.value.code == "DATABASE_ERROR"
    assert exc_info.value.operation == "commit"
    assert exc_info.value.http_status == 500

    async with file_manager.session() as db:
        result = await db.execute(select(func.count()).select_from(Topic))
        assert result.scalar_one() == 1
        topic = await db.get(Topic, "cats")
        assert topic.description == "Not dogs"


async def test_missing_table_is_database_error(file_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with file_manager.session() as db:
            await db.execute(select(Topic))
    assert exc_info.value.operation == "execute"


async def test_health_check_reports_reachable_database(file_manager):
    assert await file_manager.health_check() is True


async def test_get_db_requires_init(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    with pytest.raises(RuntimeError):
        await get_db().__anext__()


async def test_get_db_yields_managed_session(file_manager, monkeypatch):
    await file_manager.create_tables()
    monkeypatch.setattr(database, "db_manager", file_manager)
    gen = get_db()
    db = await gen.__anext__()
    result = await db.execute(select(func.count()).select_from(Topic))
    assert result.scalar_one() == 0
    await gen.aclose()


async def test_store_failure_behind_route_is_500(file_manager, monkeypatch):
    # tables never created: every query fails in the driver
    monkeypatch.setattr(database, "db_manager", file_manager)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/api/topics")
    assert res.status_code == 500
    assert res.json() == {"message": "Internal Server Error"}
