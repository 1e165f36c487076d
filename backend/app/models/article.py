"""Article ORM — a post filed under a topic, written by a user.

Invariants:
    - article_id is generated on insert
    - votes is a signed accumulator and may go negative
    - created_at set at insert time, never updated
    - comment_count is NOT stored — aggregated at read time (services/article_query.py)

Design Decisions:
    - Comments cascade-delete with their article
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Article(Base):
    """Article entity — mutated only through vote deltas."""
    __tablename__ = "articles"

    article_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    topic: Mapped[str] = mapped_column(
        String(100), ForeignKey("topics.slug"), nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    article_img_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="article",
        cascade="all, delete-orphan", passive_deletes=True,
    )
