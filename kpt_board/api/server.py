"""FastAPI application for the KPT board backend."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kpt_board import __version__
from kpt_board.core.config import Settings, get_settings
from kpt_board.c1_database_session.database_manager import DatabaseManager
from kpt_board.c2_account_service.session_store import SessionStore

# C3 Routes (Application Layer)
from kpt_board.c3_health_routes import router as health_router
from kpt_board.c3_account_routes import create_account_router
from kpt_board.c3_board_routes import create_board_router

logger = logging.getLogger(__name__)


class ServerState:
    """Process-wide resources shared by every request."""

    def __init__(self, settings: Settings, db_manager: Optional[DatabaseManager] = None):
        self.settings = settings
        self.db_manager = db_manager or DatabaseManager(
            settings.database.database_url,
            echo=settings.database.echo_sql,
        )
        self.session_store = SessionStore(
            self.db_manager,
            ttl_seconds=settings.session.ttl_seconds,
            cookie_name=settings.session.cookie_name,
        )

    def initialize(self):
        """Create tables on startup."""
        logger.info(f"Initializing database at {self.db_manager.engine.url!r}")
        self.db_manager.create_tables()


def create_app(settings: Optional[Settings] = None, db_manager: Optional[DatabaseManager] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the global settings
        db_manager: Pre-built database manager (tests pass an in-memory one)

    Returns:
        FastAPI: Application with all routers included
    """
    settings = settings or get_settings()
    server_state = ServerState(settings, db_manager)

    app = FastAPI(
        title="KPT Board API",
        description="Retrospective boards with Keep / Problem / Try tickets",
        version=__version__,
    )
    app.state.server_state = server_state

    # Add CORS middleware
    if settings.server.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.server.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    @app.on_event("startup")
    async def startup_event():
        """Initialize server on startup."""
        logger.info("Starting KPT board API...")
        server_state.initialize()

    app.include_router(health_router)
    app.include_router(create_account_router(server_state))
    app.include_router(create_board_router(server_state))

    return app
