"""Database manager and session utilities for the KPT board backend."""

import logging
from contextlib import contextmanager
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import text

from kpt_board.c1_database_session.base import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manager for database operations.

    Built once per process and shared; each request takes its own session
    from ``get_session``.
    """

    def __init__(self, database_url: str = "sqlite:///kpt_board.db", echo: bool = False):
        """Initialize database connection."""
        self.database_url = database_url

        engine_kwargs = {"echo": echo}
        url = make_url(database_url)
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # Single shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(database_url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self):
        """Create all database tables."""
        # Register models on Base.metadata
        from kpt_board.c1_account_models import account  # noqa: F401
        from kpt_board.c1_board_models import board, ticket  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

        # Create indexes for performance optimization
        self._create_indexes()

    def _create_indexes(self):
        """Create secondary indexes used by the board and ticket lookups."""
        try:
            with self.engine.connect() as conn:
                conn.execute(
                    text(
                        """
                    CREATE INDEX IF NOT EXISTS idx_tickets_board_deleted
                    ON tickets(board_id, deleted)
                """
                    )
                )

                conn.execute(
                    text(
                        """
                    CREATE INDEX IF NOT EXISTS idx_boards_created_by_deleted
                    ON boards(created_by, deleted)
                """
                    )
                )

                conn.execute(
                    text(
                        """
                    CREATE INDEX IF NOT EXISTS idx_account_sessions_expires
                    ON account_sessions(expires_at)
                """
                    )
                )

                conn.commit()
                logger.info("Created secondary indexes for boards, tickets and sessions")
        except Exception as e:
            logger.debug(f"Index creation (may already exist): {e}")

    def get_session(self):
        """Get a database session."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def drop_tables(self):
        """Drop all database tables (for testing)."""
        Base.metadata.drop_all(bind=self.engine)
