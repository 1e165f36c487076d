"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ArticleId, CommentId wrap ints; TopicSlug, Username wrap strs
    - SortColumn is the complete allow-list of sortable article columns
    - SortOrder has exactly two members — the only direction keywords ever used
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as the accepted query-string spellings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
TopicSlug = NewType("TopicSlug", str)
Username = NewType("Username", str)


# ─── Value Types ─────────────────────────────────────────────────

VoteDelta = NewType("VoteDelta", int)   # signed, applied additively


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    """Sort direction for article listings."""
    ASC = "asc"
    DESC = "desc"


class SortColumn(str, Enum):
    """Article listing columns that may appear in ORDER BY."""
    ARTICLE_ID = "article_id"
    CREATED_AT = "created_at"
    VOTES = "votes"
    COMMENT_COUNT = "comment_count"


DEFAULT_SORT_BY = SortColumn.CREATED_AT.value
DEFAULT_ORDER = "DESC"

# Upper bound of the INTEGER id and votes columns
MAX_INTEGER = 2_147_483_647
