"""Health check routes."""

from kpt_board.c3_health_routes.health_routes import router

__all__ = ["router"]
