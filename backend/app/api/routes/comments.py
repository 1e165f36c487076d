"""Comment Routes — DELETE /api/comments/{comment_id}."""

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.articles import MAX_ID
from app.core.domain_types import CommentId
from app.infrastructure.database import get_db
from app.services import comments as comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int = Path(le=MAX_ID), db: AsyncSession = Depends(get_db),
):
    """Delete a comment permanently. 204 with an empty body."""
    await comment_service.delete_comment(db, CommentId(comment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
