"""Topic ORM — a subject area articles are filed under.

Invariants:
    - slug is the primary key and the value articles reference
    - Read-only from the API's perspective (seeded externally)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Topic(Base):
    """Topic entity — identified by slug."""
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
