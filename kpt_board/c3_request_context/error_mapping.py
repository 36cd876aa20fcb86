"""HTTP status codes for service errors."""

from kpt_board.c1_board_errors.errors import (
    AccountExistsError,
    BoardServiceError,
    InvalidInputError,
    NotFoundError,
    StorageFailureError,
    UnauthorizedError,
)

STATUS_BY_ERROR = {
    InvalidInputError: 400,
    UnauthorizedError: 403,
    NotFoundError: 404,
    AccountExistsError: 409,
    StorageFailureError: 500,
}


def status_code_for(error: BoardServiceError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return 500
