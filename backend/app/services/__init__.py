"""Services Layer — data access operations, one module per resource.

Invariants:
    - Each operation either returns response schemas or raises a NewsApiError
    - Every request-derived value reaches SQL as a bound parameter

Design Decisions:
    - Module-level async functions taking the AsyncSession: routes stay thin,
      tests call operations directly with a test session
"""
