"""ORM Models — SQLAlchemy declarative tables for areas and folders.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign keys: parent and area references are plain integers

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from organizer.models.area import Area  # noqa: F401
from organizer.models.folder import Folder  # noqa: F401
