"""Equipment persistence."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class Equipment(SQLModel, table=True):
    """A piece of equipment. Its parameters are looked up, never stored here."""

    __tablename__ = "equipment"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    code: str


__all__ = ["Equipment"]
