"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AreaId, FolderId, CreatorId wrap store-assigned integers
    - RowStatus has exactly two states; both transitions are caller-driven
    - ROOT_PARENT (0) is a filter sentinel only, never a stored parent value

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values match the `row_status` column text
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AreaId = NewType("AreaId", int)
FolderId = NewType("FolderId", int)
CreatorId = NewType("CreatorId", int)


# ─── Sentinels ───────────────────────────────────────────────────

ROOT_PARENT: int = 0  # find.parent_id == ROOT_PARENT -> "parent_id IS NULL"


# ─── Enums ───────────────────────────────────────────────────────

class RowStatus(str, Enum):
    """Soft lifecycle flag, stored in the `row_status` column."""
    NORMAL = "NORMAL"
    ARCHIVED = "ARCHIVED"
