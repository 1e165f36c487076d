"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Request bodies are strict: no silent str/int coercion

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
