"""Folder ORM — persists an organizational unit scoped to an Area.

Invariants:
    - Always carries an area_id (non-nullable)
    - uid is unique across folders
    - uid is unbounded Text, like area.uid
    - parent_id is nullable: NULL means root within the folder forest

Design Decisions:
    - area_id and parent_id are plain indexed integers: cascade on area or
      parent deletion is a collaborator's job, not this table's
"""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from organizer.db.base import Base
from organizer.models.area import unix_now


class Folder(Base):
    """Folder entity, owned by exactly one area."""
    __tablename__ = "folder"
    __table_args__ = (
        CheckConstraint(
            "row_status IN ('NORMAL', 'ARCHIVED')", name="ck_folder_row_status",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    uid: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    area_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
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
