"""Ticket model for the KPT board backend."""

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from kpt_board.c1_database_session.base import Base


class Ticket(Base):
    """Categorized content item belonging to exactly one board."""

    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    board_id = Column(Integer, ForeignKey("boards.id"), nullable=False)
    author_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)

    # Normally one of TicketCategory; storage accepts any string
    category = Column(String(50), nullable=False)
    content = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)

    @classmethod
    def create(cls, board_id: int, author_id: int, category: str, content: str) -> "Ticket":
        """Build a new ticket with no id; storage assigns one on insert."""
        now = datetime.utcnow()
        return cls(
            board_id=board_id,
            author_id=author_id,
            category=category,
            content=content,
            created_at=now,
            updated_at=now,
            deleted=False,
        )

    @classmethod
    def existing(
        cls,
        ticket_id: Optional[int],
        board_id: int,
        author_id: int,
        category: str,
        content: str,
    ) -> "Ticket":
        """Build a detached ticket that refers to an already persisted row.

        Used to express a full overwrite of category and content; the object
        itself is never added to a session.
        """
        now = datetime.utcnow()
        return cls(
            id=ticket_id,
            board_id=board_id,
            author_id=author_id,
            category=category,
            content=content,
            created_at=now,
            updated_at=now,
            deleted=False,
        )

    @property
    def is_deleted(self) -> bool:
        return bool(self.deleted)

    def revise(self, new_category: str, new_content: str) -> None:
        """Overwrite category and content."""
        self.category = new_category
        self.content = new_content
        self.updated_at = datetime.utcnow()

    def mark_deleted(self) -> None:
        self.deleted = True
        self.updated_at = datetime.utcnow()

    def __repr__(self) -> str:
        return f"<Ticket id={self.id} board_id={self.board_id} category={self.category!r}>"
