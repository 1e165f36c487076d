"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions mapped to classified errors before leaving this layer

Design Decisions:
    - One module per concern (database, observability)
"""
