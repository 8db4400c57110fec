"""Folder Store — validating façade over a FolderDriver.

Invariants:
    - Same uid/parent rules as AreaStore; area_id is passed through unchecked
      (area existence is a collaborator's concern)
    - get_folder is list_folders()[0] or None
"""

import logging

from organizer.core.entities import Folder, FindFolder, UpdateFolder, DeleteFolder
from organizer.core.errors import ValidationError
from organizer.core.repository_protocols import FolderDriver, UidValidator
from organizer.core.validation import (
    check_parent_id, check_parent_update, check_uid,
)

logger = logging.getLogger(__name__)

ENTITY = "folder"


class FolderStore:
    """Entry point for folder persistence."""

    def __init__(self, driver: FolderDriver, uid_validator: UidValidator):
        self._driver = driver
        self._uid_validator = uid_validator

    async def create_folder(self, create: Folder) -> Folder:
        try:
            check_uid(self._uid_validator, create.uid, ENTITY)
            check_parent_id(create.parent_id, ENTITY)
        except ValidationError as e:
            logger.warning(
                f"Rejected folder create in area {create.area_id}: {e.message}",
                extra={"entity": ENTITY, "uid": e.context.uid},
            )
            raise
        return await self._driver.create_folder(create)

    async def list_folders(self, find: FindFolder) -> list[Folder]:
        return await self._driver.list_folders(find)

    async def get_folder(self, find: FindFolder) -> Folder | None:
        folders = await self.list_folders(find)
        return folders[0] if folders else None

    async def update_folder(self, update: UpdateFolder) -> None:
        try:
            if update.uid is not None:
                check_uid(self._uid_validator, update.uid, ENTITY)
            check_parent_update(
                update.parent_id, update.clear_parent, ENTITY, update.id,
            )
        except ValidationError as e:
            logger.warning(
                f"Rejected folder {update.id} update: {e.message}",
                extra={"entity": ENTITY, "entity_id": update.id},
            )
            raise
        await self._driver.update_folder(update)

    async def delete_folder(self, delete: DeleteFolder) -> None:
        await self._driver.delete_folder(delete)
