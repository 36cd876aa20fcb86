"""Board model for the KPT board backend."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import validates

from kpt_board.c1_database_session.base import Base


class Board(Base):
    """Retrospective board owned by a single account.

    Boards are never physically removed; ``deleted`` is the soft-delete flag.
    """

    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    created_by = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)

    @classmethod
    def create(cls, title: str, created_by: int) -> "Board":
        """Build a new board that has not been assigned an id yet."""
        now = datetime.utcnow()
        return cls(
            title=title,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            deleted=False,
        )

    @validates("id")
    def _validate_id(self, key, value):
        if self.id is not None and value != self.id:
            raise ValueError(f"Board id is immutable once assigned ({self.id} -> {value})")
        return value

    @property
    def is_deleted(self) -> bool:
        return bool(self.deleted)

    def rename(self, new_title: str) -> None:
        """Change the title and touch updated_at."""
        self.title = new_title
        self.updated_at = datetime.utcnow()

    def mark_deleted(self) -> None:
        self.deleted = True
        self.updated_at = datetime.utcnow()

    def __repr__(self) -> str:
        return f"<Board id={self.id} title={self.title!r} created_by={self.created_by}>"
