"""Topic Routes — GET /api/topics."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.services import topics as topic_service

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("")
async def get_topics(db: AsyncSession = Depends(get_db)):
    """List all topics."""
    return {"topics": await topic_service.list_topics(db)}
