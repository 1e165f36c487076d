"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies keyed by resource name

Design Decisions:
    - Thin routes delegate to services; errors flow to error_handlers.py
"""
