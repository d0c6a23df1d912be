"""Infrastructure Layer — in-process resources and cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/ types, never the reverse
    - Everything here is process-local: nothing survives a restart

Design Decisions:
    - Singletons initialized in the FastAPI lifespan, reached through dependencies
"""
