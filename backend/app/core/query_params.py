"""Query Parameter Validation — pure allow-list checks for article listing.

Invariants:
    - order is matched case-insensitively against SortOrder, nothing else passes
    - sort_by is matched exactly against SortColumn
    - topic, when given, must be a member of the caller-supplied slug set
    - Each parameter fails with its own error type (and message)

Design Decisions:
    - Pure functions, no IO: the live topic lookup happens in the shell
      (services/article_query.py) and its result is passed in
    - Lookup via Enum constructor: unknown values never reach SQL text
"""

from collections.abc import Collection

from app.core.domain_types import SortColumn, SortOrder, TopicSlug
from app.core.errors import (
    InvalidOrderQueryError, InvalidSortByQueryError, InvalidTopicQueryError,
)


def parse_order(order: str) -> SortOrder:
    """Resolve a raw `order` query value to a SortOrder."""
    try:
        return SortOrder(order.lower())
    except (ValueError, AttributeError):
        raise InvalidOrderQueryError(order)


def parse_sort_by(sort_by: str) -> SortColumn:
    """Resolve a raw `sort_by` query value to a SortColumn."""
    try:
        return SortColumn(sort_by)
    except ValueError:
        raise InvalidSortByQueryError(sort_by)


def check_topic_known(topic: str, known_slugs: Collection[str]) -> TopicSlug:
    """Return topic as a TopicSlug, or raise if no topic has that slug."""
    if topic not in known_slugs:
        raise InvalidTopicQueryError(topic)
    return TopicSlug(topic)
