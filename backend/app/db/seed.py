"""Seeding — load the four tables from a fixture dict.

Invariants:
    - Clears the four tables child-first, then loads them parent-first
    - Seeding twice leaves exactly one copy of the fixture
    - Ids are assigned 1..n in fixture order on SQLite and after reset_tables;
      PostgreSQL sequences keep counting after a plain re-seed
    - Epoch-millisecond created_at values converted to UTC datetimes

Usage:
    python -m app.db.seed     # drop/recreate tables and load REFERENCE_DATA into DATABASE_URL
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.seed_data import REFERENCE_DATA
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.models.article import Article
from app.models.comment import Comment
from app.models.topic import Topic
from app.models.user import User

logger = logging.getLogger(__name__)


def from_epoch_ms(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


async def is_empty(db: AsyncSession) -> bool:
    result = await db.execute(select(func.count()).select_from(Topic))
    return result.scalar_one() == 0


async def seed(db: AsyncSession, data: dict = REFERENCE_DATA) -> None:
    """Replace the contents of the four tables with the fixture."""
    for model in (Comment, Article, User, Topic):
        await db.execute(delete(model))

    db.add_all([Topic(**t) for t in data["topics"]])
    db.add_all([User(**u) for u in data["users"]])
    await db.flush()

    # one flush per table keeps generated ids in fixture order
    for a in data["articles"]:
        db.add(Article(**{**a, "created_at": from_epoch_ms(a["created_at"])}))
    await db.flush()

    for c in data["comments"]:
        db.add(Comment(**{**c, "created_at": from_epoch_ms(c["created_at"])}))
    await db.commit()
    logger.info(
        f"Seeded {len(data['topics'])} topics, {len(data['users'])} users, "
        f"{len(data['articles'])} articles, {len(data['comments'])} comments",
    )


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(settings.database_url)
    await manager.reset_tables()
    async with manager.session() as db:
        await seed(db)
    await manager.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
