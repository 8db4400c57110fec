"""Area Driver — translates Area structs into SQL against the `area` table.

Invariants:
    - create is a single INSERT ... RETURNING round trip; parent_id is only
      part of the column list when supplied
    - list orders by created_ts DESC, id DESC (newest first, strict)
    - create stamps created_ts and updated_ts from the injected clock
    - update always writes updated_ts (caller value or clock); zero matched rows is not an error
    - delete is unconditional; zero matched rows is not an error
    - No business validation here: the façade owns uid/parent checks

Design Decisions:
    - Column tuple selected explicitly so inserts and reads decode through one function
    - Clock injected for both timestamps so callers and tests control "now"
"""

import logging
from typing import Any, Callable

import sqlalchemy as sa

from organizer.core.domain_types import AreaId, CreatorId
from organizer.core.entities import Area, FindArea, UpdateArea, DeleteArea
from organizer.db.clauses import (
    SetRule, compose_values, compose_where, decode_parent_id,
    decode_row_status, encode_enum, equals, member_of, parent_of,
)
from organizer.infrastructure.database import DatabaseSessionManager
from organizer.models.area import Area as AreaModel, unix_now

logger = logging.getLogger(__name__)

_COLUMNS = (
    AreaModel.id,
    AreaModel.uid,
    AreaModel.creator_id,
    AreaModel.created_ts,
    AreaModel.updated_ts,
    AreaModel.row_status,
    AreaModel.name,
    AreaModel.description,
    AreaModel.parent_id,
)

_FILTERS = (
    equals("id", AreaModel.id),
    equals("uid", AreaModel.uid),
    member_of("id_list", AreaModel.id),
    member_of("uid_list", AreaModel.uid),
    equals("row_status", AreaModel.row_status, encode_enum),
    equals("creator_id", AreaModel.creator_id),
    parent_of("parent_id", AreaModel.parent_id),
)

_ASSIGNMENTS = (
    SetRule("row_status", AreaModel.row_status, encode_enum),
    SetRule("name", AreaModel.name),
    SetRule("description", AreaModel.description),
    SetRule("parent_id", AreaModel.parent_id),
    SetRule("uid", AreaModel.uid),
)


def _to_domain(row: Any) -> Area:
    data = row._mapping
    parent_id = decode_parent_id(data["parent_id"])
    return Area(
        id=AreaId(data["id"]),
        uid=data["uid"],
        creator_id=CreatorId(data["creator_id"]),
        created_ts=data["created_ts"],
        updated_ts=data["updated_ts"],
        row_status=decode_row_status(data["row_status"]),
        name=data["name"],
        description=data["description"],
        parent_id=None if parent_id is None else AreaId(parent_id),
    )


class AreaDriver:
    """SQLAlchemy implementation of the AreaDriver protocol."""

    def __init__(
        self, db: DatabaseSessionManager, clock: Callable[[], int] = unix_now,
    ):
        self._db = db
        self._clock = clock

    async def create_area(self, create: Area) -> Area:
        values = {
            "uid": create.uid,
            "creator_id": create.creator_id,
            "name": create.name,
            "description": create.description,
        }
        values["created_ts"] = values["updated_ts"] = self._clock()
        if create.parent_id is not None:
            values["parent_id"] = create.parent_id

        stmt = sa.insert(AreaModel).values(**values).returning(*_COLUMNS)
        async with self._db.session("create_area") as db:
            row = (await db.execute(stmt)).one()
            area = _to_domain(row)
            await db.commit()

        logger.info(
            f"Area {area.id} created",
            extra={"entity": "area", "entity_id": area.id, "uid": area.uid},
        )
        return area

    async def list_areas(self, find: FindArea) -> list[Area]:
        stmt = sa.select(*_COLUMNS)
        clauses = compose_where(_FILTERS, find)
        if clauses:
            stmt = stmt.where(sa.and_(*clauses))
        stmt = stmt.order_by(AreaModel.created_ts.desc(), AreaModel.id.desc())
        if find.limit is not None:
            stmt = stmt.limit(find.limit)
        if find.offset is not None:
            stmt = stmt.offset(find.offset)

        async with self._db.session("list_areas") as db:
            result = await db.execute(stmt)
            areas = [_to_domain(row) for row in result]

        logger.debug(
            f"Listed {len(areas)} area(s) with {len(clauses)} predicate(s)",
            extra={"entity": "area", "operation": "list_areas"},
        )
        return areas

    async def update_area(self, update: UpdateArea) -> None:
        values = compose_values(_ASSIGNMENTS, update)
        values["updated_ts"] = (
            update.updated_ts if update.updated_ts is not None else self._clock()
        )
        if update.clear_parent:
            values["parent_id"] = None

        stmt = (
            sa.update(AreaModel)
            .where(AreaModel.id == update.id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("update_area") as db:
            await db.execute(stmt)
            await db.commit()

        logger.info(
            f"Area {update.id} updated: {sorted(values)}",
            extra={"entity": "area", "entity_id": update.id},
        )

    async def delete_area(self, delete: DeleteArea) -> None:
        stmt = (
            sa.delete(AreaModel)
            .where(AreaModel.id == delete.id)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("delete_area") as db:
            await db.execute(stmt)
            await db.commit()

        logger.info(
            f"Area {delete.id} deleted",
            extra={"entity": "area", "entity_id": delete.id},
        )
