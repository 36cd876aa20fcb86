"""Board authorization policy.

Writes (rename, delete, ticket changes) require ownership. Reads are looser:
any authenticated account may read a board that is not soft-deleted, and the
owner may always read their own board.
"""

from typing import Optional

from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_errors.errors import NotFoundError, UnauthorizedError


def is_owner(board: Board, account_id: int) -> bool:
    return board.created_by == account_id


def assert_owner(board: Board, account_id: int, action: str = "update") -> None:
    """
    Ensure the account owns the board.

    Args:
        board: Board about to be mutated
        account_id: Authenticated account
        action: Verb used in the error message

    Raises:
        UnauthorizedError: If the account is not the board's creator
    """
    if not is_owner(board, account_id):
        raise UnauthorizedError(f"Unauthorized to {action} this board")


def can_read(board: Board, account_id: int) -> bool:
    """Owner, or anyone while the board is not soft-deleted."""
    return is_owner(board, account_id) or not board.is_deleted


def assert_readable(board: Optional[Board], account_id: int) -> Board:
    """Return the board if visible to the account, otherwise raise NotFoundError."""
    if board is None or not can_read(board, account_id):
        raise NotFoundError("Board not found or access denied")
    return board
