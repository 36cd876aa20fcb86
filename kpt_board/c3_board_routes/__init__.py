"""Board routes for the KPT board backend."""

from kpt_board.c3_board_routes.board_routes import create_board_router

__all__ = ["create_board_router"]
