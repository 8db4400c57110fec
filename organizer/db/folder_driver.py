"""Folder Driver — translates Folder structs into SQL against the `folder` table.

Same contract as area_driver: RETURNING insert, clock-stamped timestamps,
newest-first listing, updated_ts always written, silent no-op update/delete.
area_id is required on insert and can be filtered on and updated.
"""

import logging
from typing import Any, Callable

import sqlalchemy as sa

from organizer.core.domain_types import AreaId, CreatorId, FolderId
from organizer.core.entities import Folder, FindFolder, UpdateFolder, DeleteFolder
from organizer.db.clauses import (
    SetRule, compose_values, compose_where, decode_parent_id,
    decode_row_status, encode_enum, equals, member_of, parent_of,
)
from organizer.infrastructure.database import DatabaseSessionManager
from organizer.models.area import unix_now
from organizer.models.folder import Folder as FolderModel

logger = logging.getLogger(__name__)

_COLUMNS = (
    FolderModel.id,
    FolderModel.uid,
    FolderModel.creator_id,
    FolderModel.area_id,
    FolderModel.created_ts,
    FolderModel.updated_ts,
    FolderModel.row_status,
    FolderModel.name,
    FolderModel.description,
    FolderModel.parent_id,
)

_FILTERS = (
    equals("id", FolderModel.id),
    equals("uid", FolderModel.uid),
    member_of("id_list", FolderModel.id),
    member_of("uid_list", FolderModel.uid),
    equals("row_status", FolderModel.row_status, encode_enum),
    equals("creator_id", FolderModel.creator_id),
    equals("area_id", FolderModel.area_id),
    parent_of("parent_id", FolderModel.parent_id),
)

_ASSIGNMENTS = (
    SetRule("row_status", FolderModel.row_status, encode_enum),
    SetRule("area_id", FolderModel.area_id),
    SetRule("name", FolderModel.name),
    SetRule("description", FolderModel.description),
    SetRule("parent_id", FolderModel.parent_id),
    SetRule("uid", FolderModel.uid),
)


def _to_domain(row: Any) -> Folder:
    data = row._mapping
    parent_id = decode_parent_id(data["parent_id"])
    return Folder(
        id=FolderId(data["id"]),
        uid=data["uid"],
        creator_id=CreatorId(data["creator_id"]),
        area_id=AreaId(data["area_id"]),
        created_ts=data["created_ts"],
        updated_ts=data["updated_ts"],
        row_status=decode_row_status(data["row_status"]),
        name=data["name"],
        description=data["description"],
        parent_id=None if parent_id is None else FolderId(parent_id),
    )


class FolderDriver:
    """SQLAlchemy implementation of the FolderDriver protocol."""

    def __init__(
        self, db: DatabaseSessionManager, clock: Callable[[], int] = unix_now,
    ):
        self._db = db
        self._clock = clock

    async def create_folder(self, create: Folder) -> Folder:
        values = {
            "uid": create.uid,
            "creator_id": create.creator_id,
            "area_id": create.area_id,
            "name": create.name,
            "description": create.description,
        }
        values["created_ts"] = values["updated_ts"] = self._clock()
        if create.parent_id is not None:
            values["parent_id"] = create.parent_id

        stmt = sa.insert(FolderModel).values(**values).returning(*_COLUMNS)
        async with self._db.session("create_folder") as db:
            row = (await db.execute(stmt)).one()
            folder = _to_domain(row)
            await db.commit()

        logger.info(
            f"Folder {folder.id} created",
            extra={"entity": "folder", "entity_id": folder.id, "uid": folder.uid},
        )
        return folder

    async def list_folders(self, find: FindFolder) -> list[Folder]:
        stmt = sa.select(*_COLUMNS)
        clauses = compose_where(_FILTERS, find)
        if clauses:
            stmt = stmt.where(sa.and_(*clauses))
        stmt = stmt.order_by(FolderModel.created_ts.desc(), FolderModel.id.desc())
        if find.limit is not None:
            stmt = stmt.limit(find.limit)
        if find.offset is not None:
            stmt = stmt.offset(find.offset)

        async with self._db.session("list_folders") as db:
            result = await db.execute(stmt)
            folders = [_to_domain(row) for row in result]

        logger.debug(
            f"Listed {len(folders)} folder(s) with {len(clauses)} predicate(s)",
            extra={"entity": "folder", "operation": "list_folders"},
        )
        return folders

    async def update_folder(self, update: UpdateFolder) -> None:
        values = compose_values(_ASSIGNMENTS, update)
        values["updated_ts"] = (
            update.updated_ts if update.updated_ts is not None else self._clock()
        )
        if update.clear_parent:
            values["parent_id"] = None

        stmt = (
            sa.update(FolderModel)
            .where(FolderModel.id == update.id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("update_folder") as db:
            await db.execute(stmt)
            await db.commit()

        logger.info(
            f"Folder {update.id} updated: {sorted(values)}",
            extra={"entity": "folder", "entity_id": update.id},
        )

    async def delete_folder(self, delete: DeleteFolder) -> None:
        stmt = (
            sa.delete(FolderModel)
            .where(FolderModel.id == delete.id)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("delete_folder") as db:
            await db.execute(stmt)
            await db.commit()

        logger.info(
            f"Folder {delete.id} deleted",
            extra={"entity": "folder", "entity_id": delete.id},
        )
