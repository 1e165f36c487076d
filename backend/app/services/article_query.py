"""Article Listing Query Builder — validated filter/sort/order into one aggregate SELECT.

Invariants:
    - order and sort_by validated before any IO; topic validated against live slugs
    - Only SortColumn/SortOrder members reach ORDER BY, via lookup tables to
      SQLAlchemy column objects — request strings are never spliced into SQL
    - topic filter is a bound parameter
    - comment_count is LEFT JOIN + COUNT cast to INTEGER: 0 for no comments, never NULL

Design Decisions:
    - TopicSlugSource injected at construction: tests pass a fixed slug set,
      production passes SqlTopicSlugSource (one SELECT per request, no cache)
    - GROUP BY primary key only: PostgreSQL and SQLite both accept the other
      article columns as functionally dependent
"""

import logging

from sqlalchemy import Integer, Select, asc, cast, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    DEFAULT_ORDER, DEFAULT_SORT_BY, SortColumn, SortOrder,
)
from app.core.query_params import check_topic_known, parse_order, parse_sort_by
from app.core.repository_protocols import TopicSlugSource
from app.models.article import Article
from app.models.comment import Comment
from app.models.topic import Topic

logger = logging.getLogger(__name__)

COMMENT_COUNT = cast(
    func.count(Comment.comment_id), Integer,
).label("comment_count")

_SORT_COLUMNS = {
    SortColumn.ARTICLE_ID: Article.article_id,
    SortColumn.CREATED_AT: Article.created_at,
    SortColumn.VOTES: Article.votes,
    SortColumn.COMMENT_COUNT: COMMENT_COUNT,
}

_DIRECTIONS = {
    SortOrder.ASC: asc,
    SortOrder.DESC: desc,
}


def articles_with_comment_count() -> Select:
    """Base SELECT: every article column plus comment_count, grouped per article."""
    return (
        select(*Article.__table__.columns, COMMENT_COUNT)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


class SqlTopicSlugSource:
    """TopicSlugSource backed by the topics table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_topic_slugs(self) -> set[str]:
        result = await self.db.execute(select(Topic.slug))
        return set(result.scalars().all())


class ArticleQueryBuilder:
    """Builds the article listing statement from untrusted query parameters."""

    def __init__(self, topics: TopicSlugSource):
        self._topics = topics

    async def build(
        self,
        topic: str | None = None,
        sort_by: str = DEFAULT_SORT_BY,
        order: str = DEFAULT_ORDER,
    ) -> Select:
        """Validate parameters and return the listing SELECT.

        Raises InvalidOrderQueryError, InvalidSortByQueryError or
        InvalidTopicQueryError, checked in that order.
        """
        direction = _DIRECTIONS[parse_order(order)]
        column = _SORT_COLUMNS[parse_sort_by(sort_by)]

        query = articles_with_comment_count()
        if topic is not None:
            slugs = await self._topics.list_topic_slugs()
            query = query.where(
                Article.topic == check_topic_known(topic, slugs),
            )
        logger.debug(
            f"Article listing: topic={topic!r} sort_by={sort_by} order={order}",
        )
        return query.order_by(direction(column))
