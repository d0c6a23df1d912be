"""Shop Cart Package — storefront cart state engine and its HTTP shell.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
