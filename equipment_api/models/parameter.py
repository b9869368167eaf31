"""Parameter persistence."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class Parameter(SQLModel, table=True):
    """A named parameter belonging to a piece of equipment.

    ``equipment_id`` is indexed rather than declared as a foreign key: it is
    not checked against existing equipment, and rows outlive the equipment
    they point to. ``equipment_code`` is a denormalized copy of the owner's
    code and may drift from it.
    """

    __tablename__ = "parameter"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    equipment_code: str
    equipment_id: int = Field(default=0, index=True)


__all__ = ["Parameter"]
