"""Error kinds raised by board, ticket and account operations."""

from kpt_board.c1_board_errors.errors import (
    BoardServiceError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
    StorageFailureError,
    AccountExistsError,
)

__all__ = [
    "BoardServiceError",
    "InvalidInputError",
    "NotFoundError",
    "UnauthorizedError",
    "StorageFailureError",
    "AccountExistsError",
]
