"""Infrastructure Layer — engine/session management and logging setup.

Invariants:
    - Infrastructure never imports from services/
    - All store failures mapped to StoreError (core/errors.py)
"""
