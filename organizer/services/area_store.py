"""Area Store — validating façade over an AreaDriver.

Invariants:
    - create_area rejects an invalid uid before the driver is called
    - update_area validates uid only when supplied
    - parent_id == ROOT_PARENT is rejected on create/update (use clear_parent)
    - get_area is list_areas()[0] or None; no uniqueness is assumed
    - update/delete return None; not-found is silent

Design Decisions:
    - Driver and validator injected (Protocol types): testable with fakes,
      no module-level matcher
"""

import logging

from organizer.core.entities import Area, FindArea, UpdateArea, DeleteArea
from organizer.core.errors import ValidationError
from organizer.core.repository_protocols import AreaDriver, UidValidator
from organizer.core.validation import (
    check_parent_id, check_parent_update, check_uid,
)

logger = logging.getLogger(__name__)

ENTITY = "area"


class AreaStore:
    """Entry point for area persistence."""

    def __init__(self, driver: AreaDriver, uid_validator: UidValidator):
        self._driver = driver
        self._uid_validator = uid_validator

    async def create_area(self, create: Area) -> Area:
        try:
            check_uid(self._uid_validator, create.uid, ENTITY)
            check_parent_id(create.parent_id, ENTITY)
        except ValidationError as e:
            logger.warning(
                f"Rejected area create: {e.message}",
                extra={"entity": ENTITY, "uid": e.context.uid},
            )
            raise
        return await self._driver.create_area(create)

    async def list_areas(self, find: FindArea) -> list[Area]:
        return await self._driver.list_areas(find)

    async def get_area(self, find: FindArea) -> Area | None:
        areas = await self.list_areas(find)
        if not areas:
            return None
        return areas[0]

    async def update_area(self, update: UpdateArea) -> None:
        try:
            if update.uid is not None:
                check_uid(self._uid_validator, update.uid, ENTITY)
            check_parent_update(
                update.parent_id, update.clear_parent, ENTITY, update.id,
            )
        except ValidationError as e:
            logger.warning(
                f"Rejected area {update.id} update: {e.message}",
                extra={"entity": ENTITY, "entity_id": update.id},
            )
            raise
        await self._driver.update_area(update)

    async def delete_area(self, delete: DeleteArea) -> None:
        await self._driver.delete_area(delete)
