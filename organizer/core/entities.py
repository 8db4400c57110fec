"""Entities — Area/Folder records and their find/update/delete request structs.

Invariants:
    - id, created_ts, updated_ts are store-assigned (0 until created)
    - parent_id on an entity is None for roots, never the ROOT_PARENT sentinel
    - Every optional field in Find*/Update* structs means "absent" when None
    - Empty id_list / uid_list are treated as absent
    - clear_parent=True writes parent_id = NULL; it cannot be combined with parent_id

Design Decisions:
    - Plain dataclasses: pure, no IO, comparable by value in tests
    - Ids typed with the domain_types NewTypes; a FolderId never passes for an AreaId
    - Folder repeats Area's fields instead of inheriting: the two tables are
      independent and the column order reads top to bottom like the schema
"""

from dataclasses import dataclass, field

from organizer.core.domain_types import AreaId, CreatorId, FolderId, RowStatus


# ─── Area ────────────────────────────────────────────────────────

@dataclass
class Area:
    """Top-level organizational unit."""
    uid: str
    creator_id: CreatorId
    name: str
    description: str = ""
    parent_id: AreaId | None = None
    id: AreaId = AreaId(0)
    row_status: RowStatus = RowStatus.NORMAL
    created_ts: int = 0
    updated_ts: int = 0


@dataclass
class FindArea:
    id: AreaId | None = None
    uid: str | None = None
    id_list: list[AreaId] = field(default_factory=list)
    uid_list: list[str] = field(default_factory=list)
    row_status: RowStatus | None = None
    creator_id: CreatorId | None = None
    parent_id: AreaId | None = None  # ROOT_PARENT -> roots only
    limit: int | None = None
    offset: int | None = None


@dataclass
class UpdateArea:
    id: AreaId
    uid: str | None = None
    updated_ts: int | None = None
    row_status: RowStatus | None = None
    name: str | None = None
    description: str | None = None
    parent_id: AreaId | None = None
    clear_parent: bool = False


@dataclass
class DeleteArea:
    id: AreaId


# ─── Folder ──────────────────────────────────────────────────────

@dataclass
class Folder:
    """Organizational unit scoped to an Area."""
    uid: str
    creator_id: CreatorId
    area_id: AreaId
    name: str
    description: str = ""
    parent_id: FolderId | None = None
    id: FolderId = FolderId(0)
    row_status: RowStatus = RowStatus.NORMAL
    created_ts: int = 0
    updated_ts: int = 0


@dataclass
class FindFolder:
    id: FolderId | None = None
    uid: str | None = None
    id_list: list[FolderId] = field(default_factory=list)
    uid_list: list[str] = field(default_factory=list)
    row_status: RowStatus | None = None
    creator_id: CreatorId | None = None
    area_id: AreaId | None = None
    parent_id: FolderId | None = None  # ROOT_PARENT -> roots only
    limit: int | None = None
    offset: int | None = None


@dataclass
class UpdateFolder:
    id: FolderId
    uid: str | None = None
    updated_ts: int | None = None
    row_status: RowStatus | None = None
    area_id: AreaId | None = None
    name: str | None = None
    description: str | None = None
    parent_id: FolderId | None = None
    clear_parent: bool = False


@dataclass
class DeleteFolder:
    id: FolderId
