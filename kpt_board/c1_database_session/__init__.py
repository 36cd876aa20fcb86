"""Database session management for the KPT board backend."""

from kpt_board.c1_database_session.base import Base
from kpt_board.c1_database_session.database_manager import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
