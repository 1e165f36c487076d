"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Topics and users are referenced by natural key (slug, username)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.topic import Topic  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.article import Article  # noqa: F401
from app.models.comment import Comment  # noqa: F401
