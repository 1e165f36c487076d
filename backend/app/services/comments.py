"""Comment Operations — listing, insertion, and deletion.

Invariants:
    - Listing and insertion check the article exists first (404 otherwise)
    - An article with no comments lists as [], not 404
    - Insertion checks the author is an existing user (404 otherwise)
    - Comments listed newest first (created_at DESC)
    - Deletion is permanent; deleting an unknown id raises NotFoundError

Design Decisions:
    - Explicit existence checks over FK-violation parsing: SQLite does not
      enforce foreign keys by default, and the error kind stays NOT_FOUND
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ArticleId, CommentId
from app.core.errors import NotFoundError
from app.models.comment import Comment
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.articles import ensure_article_exists
from app.services.users import get_user_or_404

logger = logging.getLogger(__name__)


async def list_comments_for_article(
    db: AsyncSession, article_id: ArticleId,
) -> list[CommentResponse]:
    """Return an article's comments, newest first."""
    await ensure_article_exists(article_id, db)
    result = await db.execute(
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc()),
    )
    return [CommentResponse.model_validate(c) for c in result.scalars().all()]


async def insert_comment(
    db: AsyncSession, article_id: ArticleId, payload: CommentCreate,
) -> CommentResponse:
    """Insert a comment on an article by an existing user."""
    await ensure_article_exists(article_id, db)
    await get_user_or_404(payload.username, db)

    comment = Comment(
        article_id=article_id, author=payload.username, body=payload.body,
    )
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    logger.info(
        f"Comment {comment.comment_id} posted on article {article_id}",
        extra={
            "article_id": article_id,
            "comment_id": comment.comment_id,
            "username": payload.username,
        },
    )
    return CommentResponse.model_validate(comment)


async def delete_comment(db: AsyncSession, comment_id: CommentId) -> None:
    """Delete a comment permanently."""
    result = await db.execute(
        delete(Comment).where(Comment.comment_id == comment_id),
    )
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError("Comment", comment_id)
    await db.commit()
    logger.info(
        f"Comment {comment_id} deleted", extra={"comment_id": comment_id},
    )
