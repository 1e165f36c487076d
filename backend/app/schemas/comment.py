"""Comment Schemas — comment payloads and the POST body.

Invariants:
    - CommentCreate requires both username and body, both strings, non-empty
    - Wrong types are rejected, never coerced (strict mode)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


class CommentCreate(BaseModel):
    """POST body for a new comment."""
    model_config = ConfigDict(strict=True)

    username: str = Field(min_length=1)
    body: str = Field(min_length=1)
