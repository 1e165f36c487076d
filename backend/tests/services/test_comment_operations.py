"""Comment Operations — listing, insertion, and deletion against the seeded DB.

Tests cover:
    - Comments listed newest first; empty list for an article with none
    - Listing for a missing article raises NotFoundError
    - Insert assigns id, votes 0, and created_at; unknown article/user raise NotFoundError
    - Delete removes the row; deleting a missing id raises NotFoundError
"""

import pytest
from sqlalchemy import select

from app.core.errors import NotFoundError
from app.models.comment import Comment
from app.schemas.comment import CommentCreate
from app.services.comments import (
    delete_comment, insert_comment, list_comments_for_article,
)


async def test_list_comments_newest_first(test_db):
    comments = await list_comments_for_article(test_db, 1)
    assert len(comments) == 11
    stamps = [c.created_at for c in comments]
    assert stamps == sorted(stamps, reverse=True)


async def test_list_comments_empty_for_article_without_comments(test_db):
    assert await list_comments_for_article(test_db, 2) == []


async def test_list_comments_unknown_article_raises(test_db):
    with pytest.raises(NotFoundError):
        await list_comments_for_article(test_db, 999)


async def test_insert_comment_returns_created_row(test_db):
    comment = await insert_comment(
        test_db, 2, CommentCreate(username="lurker", body="First!"),
    )
    assert comment.comment_id == 19
    assert comment.article_id == 2
    assert comment.author == "lurker"
    assert comment.body == "First!"
    assert comment.votes == 0
    assert comment.created_at is not None


async def test_insert_comment_unknown_article_raises(test_db):
    with pytest.raises(NotFoundError):
        await insert_comment(
            test_db, 999, CommentCreate(username="lurker", body="hello"),
        )


async def test_insert_comment_unknown_user_raises(test_db):
    with pytest.raises(NotFoundError) as exc_info:
        await insert_comment(
            test_db, 2, CommentCreate(username="nobody", body="hello"),
        )
    assert exc_info.value.resource_type == "User"


async def test_delete_comment_removes_row(test_db):
    await delete_comment(test_db, 2)
    result = await test_db.execute(
        select(Comment).where(Comment.comment_id == 2),
    )
    assert result.scalar_one_or_none() is None


async def test_delete_missing_comment_raises(test_db):
    with pytest.raises(NotFoundError):
        await delete_comment(test_db, 999)
