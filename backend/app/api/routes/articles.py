"""Article Routes — listing, detail, vote updates, and the article's comments.

Invariants:
    - Non-integer article_id fails FastAPI path validation → 400 before any query
    - Query parameters arrive as raw strings; validation happens in the query builder
    - Bodies validated by strict Pydantic schemas → 400 on wrong shape/type

Design Decisions:
    - Comments nested under /articles/{id}/comments live here: the article is the
      addressed resource, services/comments.py does the work
"""

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    ArticleId, DEFAULT_ORDER, DEFAULT_SORT_BY, MAX_INTEGER, VoteDelta,
)
from app.infrastructure.database import get_db
from app.schemas.article import ArticleVotesUpdate
from app.schemas.comment import CommentCreate
from app.services import articles as article_service
from app.services import comments as comment_service

router = APIRouter(prefix="/api/articles", tags=["articles"])

MAX_ID = MAX_INTEGER


@router.get("")
async def get_articles(
    topic: str | None = Query(None),
    sort_by: str = Query(DEFAULT_SORT_BY),
    order: str = Query(DEFAULT_ORDER),
    db: AsyncSession = Depends(get_db),
):
    """List articles with comment counts, filtered by topic and sorted."""
    articles = await article_service.list_articles(
        db, topic=topic, sort_by=sort_by, order=order,
    )
    return {"articles": articles}


@router.get("/{article_id}")
async def get_article(
    article_id: int = Path(le=MAX_ID), db: AsyncSession = Depends(get_db),
):
    """Get one article with its comment count."""
    article = await article_service.get_article(db, ArticleId(article_id))
    return {"article": article}


@router.patch("/{article_id}")
async def patch_article_votes(
    body: ArticleVotesUpdate,
    article_id: int = Path(le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    """Apply a signed vote delta to an article."""
    article = await article_service.update_article_votes(
        db, ArticleId(article_id), VoteDelta(body.inc_votes),
    )
    return {"article": article}


@router.get("/{article_id}/comments")
async def get_article_comments(
    article_id: int = Path(le=MAX_ID), db: AsyncSession = Depends(get_db),
):
    """List an article's comments, newest first."""
    comments = await comment_service.list_comments_for_article(
        db, ArticleId(article_id),
    )
    return {"comments": comments}


@router.post("/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_article_comment(
    body: CommentCreate,
    article_id: int = Path(le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    """Post a comment on an article."""
    comment = await comment_service.insert_comment(
        db, ArticleId(article_id), body,
    )
    return {"comment": comment}
