"""Services — validating façades over the persistence drivers.

Invariants:
    - Façades own no state beyond injected collaborators
    - Validation failures raise before any store interaction
"""
