"""Boundary Protocols — contracts between the façades and their collaborators.

Invariants:
    - Core NEVER imports from the shell; dependency arrows point inward only
    - Façades see drivers and validators only through these Protocol types
    - Implementations provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Driver methods are async because implementations do IO
"""

from typing import Protocol

from organizer.core.entities import (
    Area, FindArea, UpdateArea, DeleteArea,
    Folder, FindFolder, UpdateFolder, DeleteFolder,
)


class UidValidator(Protocol):
    """Opaque identifier-format predicate."""
    def is_valid(self, uid: str) -> bool: ...


class AreaDriver(Protocol):
    """Area persistence, implemented by db/area_driver.py."""
    async def create_area(self, create: Area) -> Area: ...
    async def list_areas(self, find: FindArea) -> list[Area]: ...
    async def update_area(self, update: UpdateArea) -> None: ...
    async def delete_area(self, delete: DeleteArea) -> None: ...


class FolderDriver(Protocol):
    """Folder persistence, implemented by db/folder_driver.py."""
    async def create_folder(self, create: Folder) -> Folder: ...
    async def list_folders(self, find: FindFolder) -> list[Folder]: ...
    async def update_folder(self, update: UpdateFolder) -> None: ...
    async def delete_folder(self, delete: DeleteFolder) -> None: ...
