"""Core Layer — domain structs, identifier rules and error types. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell (drivers, session manager)
"""
