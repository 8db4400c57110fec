"""Database Layer — declarative Base, shared clause builder and per-entity drivers.

Invariants:
    - Drivers translate structs into SQL; they never validate business rules
    - Every driver call opens its own session (no shared transaction across calls)

Design Decisions:
    - SQLAlchemy expressions over string concatenation: every value is a bound parameter
"""
