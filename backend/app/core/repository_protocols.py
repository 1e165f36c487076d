"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - IO needed by query validation is accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass any object with the method
    - Async in Protocol: implementations do IO, the pure checks that USE the
      result (core/query_params.py) are never async themselves
"""

from typing import Protocol


class TopicSlugSource(Protocol):
    """Live allow-list of topic slugs — queried per request, never cached."""
    async def list_topic_slugs(self) -> set[str]: ...
