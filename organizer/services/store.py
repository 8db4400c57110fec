"""Store — bundles the area and folder façades over one session manager.

Invariants:
    - Both façades share the same DatabaseSessionManager and UidValidator
    - Building a Store performs no IO

Design Decisions:
    - Composition root for the façades; bootstrap.open_store wires it from Settings
"""

from dataclasses import dataclass
from typing import Callable

from organizer.core.repository_protocols import UidValidator
from organizer.core.validation import RegexUidValidator
from organizer.db.area_driver import AreaDriver
from organizer.db.folder_driver import FolderDriver
from organizer.infrastructure.database import DatabaseSessionManager
from organizer.models.area import unix_now
from organizer.services.area_store import AreaStore
from organizer.services.folder_store import FolderStore


@dataclass
class Store:
    areas: AreaStore
    folders: FolderStore


def build_store(
    db: DatabaseSessionManager,
    uid_validator: UidValidator | None = None,
    clock: Callable[[], int] = unix_now,
) -> Store:
    """Wire drivers and façades; defaults to the standard uid pattern."""
    validator = uid_validator or RegexUidValidator()
    return Store(
        areas=AreaStore(AreaDriver(db, clock), validator),
        folders=FolderStore(FolderDriver(db, clock), validator),
    )
