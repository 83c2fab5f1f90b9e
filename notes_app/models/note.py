"""
Note Model.

Row shape of the local notes table:

    notes(id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT,
          content TEXT, timestamp INTEGER)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notes_app.models.base import Base


class NoteEntity(Base):
    """
    Note database model.

    The id is None until the row is inserted; SQLite then assigns it.
    timestamp holds epoch milliseconds and drives the list ordering.
    """

    __tablename__ = "notes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    timestamp: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<NoteEntity(id={self.id}, title={self.title!r}, timestamp={self.timestamp})>"
