"""Core Layer — pure cart domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Every cart operation is synchronous and runs to completion before returning

Design Decisions:
    - Functional core separated from imperative shell: the store and projection
      are testable headlessly, the shell owns sessions, toasts and HTTP
"""
