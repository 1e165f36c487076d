"""Article Schemas — article payloads with the read-time comment count.

Invariants:
    - comment_count is always an int (0 for articles without comments, never null)
    - ArticleVotesUpdate.inc_votes is a strict int: "5", 5.5 and true are rejected
    - inc_votes is bounded by the INTEGER column range: oversized deltas are a bad body
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from app.core.domain_types import MAX_INTEGER


class ArticleRow(BaseModel):
    """Stored article columns, as returned by a vote update."""
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: str | None = None


class ArticleResponse(ArticleRow):
    """Article row plus aggregated comment_count."""
    comment_count: int


class ArticleVotesUpdate(BaseModel):
    """PATCH body — signed vote delta."""
    inc_votes: StrictInt = Field(ge=-MAX_INTEGER, le=MAX_INTEGER)
