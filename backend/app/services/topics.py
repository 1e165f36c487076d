"""Topic Operations — read-only access to topics."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.topic import Topic
from app.schemas.topic import TopicResponse


async def list_topics(db: AsyncSession) -> list[TopicResponse]:
    """Return every topic."""
    result = await db.execute(select(Topic))
    return [TopicResponse.model_validate(t) for t in result.scalars().all()]
