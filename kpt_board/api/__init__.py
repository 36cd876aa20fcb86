"""FastAPI application assembly."""

from kpt_board.api.server import ServerState, create_app

__all__ = ["ServerState", "create_app"]
