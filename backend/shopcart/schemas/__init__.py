"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (HTTP bodies, API responses)
    - Core value objects (Product, CartSnapshot) converted here, never leaked raw

Design Decisions:
    - Separate from core/: schemas are API contracts, core types are domain state
"""
