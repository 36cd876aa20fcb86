"""Account routes for the KPT board backend."""

from kpt_board.c3_account_routes.account_routes import create_account_router

__all__ = ["create_account_router"]
