"""Area ORM — persists the top-level organizational unit.

Invariants:
    - id is an autoincrement integer primary key (store-assigned)
    - uid is unique and non-nullable
    - uid is unbounded Text: its format is the configured uid pattern's concern
    - row_status is NORMAL or ARCHIVED (check constraint)
    - parent_id is nullable: NULL means root

Design Decisions:
    - Unix-second integer timestamps, defaulted at insert time
    - parent_id has no ForeignKey: cycle/integrity checks belong to callers,
      and deleting a parent must not cascade or fail at this layer
"""

import time

from sqlalchemy import BigInteger, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from organizer.db.base import Base


def unix_now() -> int:
    return int(time.time())


class Area(Base):
    """Area entity, root of the folder hierarchy."""
    __tablename__ = "area"
    __table_args__ = (
        CheckConstraint(
            "row_status IN ('NORMAL', 'ARCHIVED')", name="ck_area_row_status",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    uid: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_ts: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=unix_now,
    )
    updated_ts: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=unix_now,
    )
    row_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="NORMAL", server_default="NORMAL",
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default="",
    )
    parent_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True, index=True,
    )
