"""Article Operations — listing, lookup, and vote updates.

Invariants:
    - list_articles delegates all parameter validation to ArticleQueryBuilder
    - get_article / update_article_votes raise NotFoundError for unknown ids
    - Vote updates are ONE statement (votes = votes + :delta ... RETURNING) —
      no read-then-write, concurrent deltas commute

Design Decisions:
    - ensure_article_exists exported for comments (404 before touching comments)
    - update_article_votes returns the RETURNING row, without comment_count
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    ArticleId, DEFAULT_ORDER, DEFAULT_SORT_BY, VoteDelta,
)
from app.core.errors import NotFoundError
from app.models.article import Article
from app.schemas.article import ArticleResponse, ArticleRow
from app.services.article_query import (
    ArticleQueryBuilder, SqlTopicSlugSource, articles_with_comment_count,
)

logger = logging.getLogger(__name__)


async def ensure_article_exists(article_id: ArticleId, db: AsyncSession) -> None:
    """Raise NotFoundError unless the article exists. Exported for comments."""
    result = await db.execute(
        select(Article.article_id).where(Article.article_id == article_id),
    )
    if result.scalar_one_or_none() is None:
        raise NotFoundError("Article", article_id)


async def list_articles(
    db: AsyncSession,
    topic: str | None = None,
    sort_by: str = DEFAULT_SORT_BY,
    order: str = DEFAULT_ORDER,
) -> list[ArticleResponse]:
    """List articles with comment counts, optionally filtered and sorted."""
    builder = ArticleQueryBuilder(SqlTopicSlugSource(db))
    query = await builder.build(topic=topic, sort_by=sort_by, order=order)
    result = await db.execute(query)
    return [ArticleResponse.model_validate(row) for row in result.all()]


async def get_article(db: AsyncSession, article_id: ArticleId) -> ArticleResponse:
    """Get one article with its comment count."""
    result = await db.execute(
        articles_with_comment_count().where(Article.article_id == article_id),
    )
    row = result.one_or_none()
    if row is None:
        raise NotFoundError("Article", article_id)
    return ArticleResponse.model_validate(row)


async def update_article_votes(
    db: AsyncSession, article_id: ArticleId, inc_votes: VoteDelta,
) -> ArticleRow:
    """Apply a signed vote delta atomically and return the updated article."""
    result = await db.execute(
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
        .returning(*Article.__table__.columns),
    )
    row = result.one_or_none()
    if row is None:
        raise NotFoundError("Article", article_id)
    await db.commit()
    logger.info(
        f"Applied vote delta {inc_votes:+d} to article {article_id}",
        extra={"article_id": article_id},
    )
    return ArticleRow.model_validate(row)
