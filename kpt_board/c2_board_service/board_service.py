"""Service layer for board use cases: list, read, save and delete."""

import logging
from typing import List

from kpt_board.c1_board_errors.errors import BoardServiceError, NotFoundError
from kpt_board.c1_board_policy.policy import assert_owner, assert_readable
from kpt_board.c1_board_schemas.results import BoardSummary, BoardView, DeleteSummary, SaveSummary, TicketFailure
from kpt_board.c1_board_schemas.snapshot import BoardSnapshot
from kpt_board.c2_board_service.assembler import assemble
from kpt_board.c2_board_service.reconciler import BoardReconciler, check_board_id
from kpt_board.c2_storage.protocols import BoardStore, TicketStore
from kpt_board.c2_ticket_service.ticket_service import TicketService

logger = logging.getLogger(__name__)


class BoardService:
    """Entry points used by the board routes."""

    def __init__(self, board_store: BoardStore, ticket_store: TicketStore):
        self.board_store = board_store
        self.ticket_service = TicketService(ticket_store)
        self.reconciler = BoardReconciler(board_store, self.ticket_service)

    def list_boards(self, account_id: int) -> List[BoardSummary]:
        """List the account's own non-deleted boards."""
        boards = self.board_store.find_by_user_id(account_id)
        return [BoardSummary(id=board.id, title=board.title) for board in boards]

    def save_board(self, account_id: int, snapshot: BoardSnapshot) -> SaveSummary:
        """Create or update a board from a submitted snapshot."""
        summary = self.reconciler.save(account_id, snapshot)
        logger.info(f"[BOARD_SERVICE] Board {summary.board_id}: {summary.message}")
        return summary

    def get_board_view(self, account_id: int, board_id: int) -> BoardView:
        """
        Get a board's tickets grouped by category.

        Args:
            account_id: Account requesting the board
            board_id: ID of the board

        Returns:
            Categorized view in Keep/Problem/Try order

        Raises:
            InvalidInputError: If the id is outside the storable range
            NotFoundError: If the board does not exist or is not readable by the account
            StorageFailureError: If loading the board or its tickets fails
        """
        check_board_id(board_id)
        board = assert_readable(self.board_store.find(board_id), account_id)
        tickets = self.ticket_service.get_all_tickets(board_id)
        return assemble(board, tickets)

    def delete_board(self, account_id: int, board_id: int) -> DeleteSummary:
        """
        Soft-delete a board after soft-deleting its tickets.

        Ticket deletions are best effort: each failure is logged and reported,
        and the board is deleted regardless. A failure on the board itself is
        raised to the caller.

        Raises:
            InvalidInputError: If the id is outside the storable range
            NotFoundError: If the board does not exist
            UnauthorizedError: If the account does not own the board
            StorageFailureError: If the board deletion fails
        """
        check_board_id(board_id)
        board = self.board_store.find(board_id)
        if board is None:
            raise NotFoundError("Board not found")
        assert_owner(board, account_id, action="delete")

        failures = []
        try:
            ticket_ids = [ticket.id for ticket in self.ticket_service.get_all_tickets(board_id)]
        except BoardServiceError as e:
            logger.error(f"[BOARD_SERVICE] Failed to list tickets of board {board_id}: {e.message}")
            ticket_ids = []

        for ticket_id in ticket_ids:
            try:
                self.ticket_service.delete_ticket(ticket_id)
            except BoardServiceError as e:
                logger.error(f"[BOARD_SERVICE] Failed to delete ticket {ticket_id}: {e.message}")
                failures.append(TicketFailure(ticket_id=ticket_id, operation="delete", error=e.message))

        try:
            self.board_store.delete(board_id)
        except BoardServiceError as e:
            logger.error(f"[BOARD_SERVICE] Error deleting board {board_id}: {e.message}")
            raise

        logger.info(f"[BOARD_SERVICE] Deleted board {board_id} ({len(ticket_ids)} tickets, {len(failures)} failures)")
        return DeleteSummary(board_id=board_id, message="Board deleted successfully", failures=failures)
