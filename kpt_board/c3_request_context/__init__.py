"""Request-scoped helpers shared by the routers."""

from kpt_board.c3_request_context.user_context import UserContext, create_user_context_dependency
from kpt_board.c3_request_context.error_mapping import status_code_for

__all__ = ["UserContext", "create_user_context_dependency", "status_code_for"]
