"""Board reconciliation: bring persisted tickets in line with a submitted snapshot.

The snapshot is authoritative. Primary failures (bad board id, missing board,
wrong owner) abort before anything is written. Ticket-level failures are
collected and reported on the summary without stopping sibling tickets, and
nothing already written is rolled back.
"""

import logging
from typing import List, Optional

from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c1_board_errors.errors import (
    BoardServiceError,
    InvalidInputError,
    NotFoundError,
    StorageFailureError,
    UnauthorizedError,
)
from kpt_board.c1_board_policy.policy import assert_owner, assert_readable
from kpt_board.c1_board_schemas.results import SaveSummary, TicketFailure
from kpt_board.c1_board_schemas.snapshot import BoardSnapshot, SubmittedTicket
from kpt_board.c2_storage.protocols import BoardStore
from kpt_board.c2_ticket_service.ticket_service import TicketService

logger = logging.getLogger(__name__)


# Largest id a 64-bit signed INTEGER column can hold
MAX_BOARD_ID = 2 ** 63 - 1


def check_board_id(board_id: int) -> int:
    """
    Reject board ids that no stored board can have.

    Raises:
        InvalidInputError: If the id is negative or does not fit in storage
    """
    if board_id < 0 or board_id > MAX_BOARD_ID:
        raise InvalidInputError("titleId is invalid")
    return board_id


def parse_board_id(raw: Optional[str]) -> int:
    """
    Parse a client supplied board identifier.

    Raises:
        InvalidInputError: If the value is not an ASCII decimal integer within storage range
    """
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()):
        raise InvalidInputError("titleId is invalid")
    return check_board_id(int(value))


def _join_failures(failures: List[TicketFailure]) -> str:
    return "; ".join(failure.describe() for failure in failures)


class BoardReconciler:
    """Create a board from a snapshot, or reconcile an existing one against it."""

    def __init__(self, board_store: BoardStore, ticket_service: TicketService):
        self.board_store = board_store
        self.ticket_service = ticket_service

    def save(self, account_id: int, snapshot: BoardSnapshot) -> SaveSummary:
        """
        Create or update a board and its tickets from a snapshot.

        Args:
            account_id: Authenticated account submitting the snapshot
            snapshot: Title, optional board id and categorized tickets

        Returns:
            SaveSummary, possibly carrying ticket-level failures

        Raises:
            InvalidInputError: If the board id cannot be parsed
            NotFoundError: If the board does not exist or is not visible
            UnauthorizedError: If the account does not own the board
            StorageFailureError: If the board itself cannot be created or updated
        """
        if snapshot.board_id is None:
            return self._create(account_id, snapshot)
        return self._update(account_id, snapshot)

    def _create(self, account_id: int, snapshot: BoardSnapshot) -> SaveSummary:
        logger.info(f"[RECONCILER] Creating board '{snapshot.title}' for account {account_id}")

        board = Board.create(snapshot.title, account_id)
        try:
            board_id = self.board_store.store(board)
        except StorageFailureError as e:
            logger.error(f"[RECONCILER] Create failed: {e.message}")
            raise e.with_prefix("Create failed") from e

        failures = []
        for category, submitted in snapshot.iter_tickets():
            ticket = Ticket.create(board_id, account_id, category, submitted.content)
            try:
                self.ticket_service.save_ticket(ticket)
            except BoardServiceError as e:
                logger.warning(f"[RECONCILER] Failed to save ticket '{submitted.content}': {e.message}")
                failures.append(
                    TicketFailure(
                        ticket_id=None,
                        content=submitted.content,
                        operation="create",
                        error=e.message,
                    )
                )

        if failures:
            message = f"Board created but some tickets failed: {_join_failures(failures)}"
        else:
            message = "Board and tickets created"

        return SaveSummary(
            board_id=board_id,
            title=snapshot.title,
            created=True,
            message=message,
            failures=failures,
        )

    def _update(self, account_id: int, snapshot: BoardSnapshot) -> SaveSummary:
        board_id = parse_board_id(snapshot.board_id)
        logger.info(f"[RECONCILER] Reconciling board {board_id} for account {account_id}")

        try:
            board = assert_readable(self.board_store.find(board_id), account_id)
        except NotFoundError as e:
            raise NotFoundError("Board not found") from e
        assert_owner(board, account_id)

        # Snapshot of persisted state before this request changes anything
        try:
            existing_ids = [ticket.id for ticket in self.ticket_service.get_all_tickets(board_id)]
        except StorageFailureError as e:
            raise e.with_prefix("Failed to fetch existing tickets") from e

        deletion_failures = self._delete_missing(existing_ids, snapshot.received_ids())
        failures = self._upsert(board_id, account_id, snapshot)

        try:
            self._rename(board, account_id, snapshot.title)
        except (UnauthorizedError, StorageFailureError) as e:
            logger.error(f"[RECONCILER] Board update failed for board {board_id}: {e.message}")
            raise e.with_prefix("Board update failed") from e

        if failures:
            message = f"Board updated but some tickets failed: {_join_failures(failures)}"
        else:
            message = "Board and tickets updated"

        return SaveSummary(
            board_id=board_id,
            title=snapshot.title,
            created=False,
            message=message,
            failures=failures,
            deletion_failures=deletion_failures,
        )

    def _delete_missing(self, existing_ids: List[int], received_ids: set) -> List[TicketFailure]:
        """Soft-delete persisted tickets the snapshot no longer mentions."""
        failures = []
        for ticket_id in existing_ids:
            if ticket_id in received_ids:
                continue
            try:
                self.ticket_service.delete_ticket(ticket_id)
            except BoardServiceError as e:
                logger.warning(f"[RECONCILER] Failed to delete ticket {ticket_id}: {e.message}")
                failures.append(
                    TicketFailure(ticket_id=ticket_id, operation="delete", error=e.message)
                )
        return failures

    def _upsert(self, board_id: int, account_id: int, snapshot: BoardSnapshot) -> List[TicketFailure]:
        """Create new tickets and overwrite existing ones, in submission order."""
        failures = []
        for category, submitted in snapshot.iter_tickets():
            operation = "create" if submitted.is_new else "update"
            try:
                if submitted.is_new:
                    self.ticket_service.save_ticket(
                        Ticket.create(board_id, account_id, category, submitted.content)
                    )
                else:
                    self.ticket_service.update_ticket(
                        self._overwrite_for(board_id, account_id, category, submitted)
                    )
            except BoardServiceError as e:
                logger.warning(f"[RECONCILER] Ticket {submitted.ticket_id} failed ({operation}): {e.message}")
                failures.append(
                    TicketFailure(
                        ticket_id=submitted.ticket_id,
                        content=submitted.content,
                        operation=operation,
                        error=e.message,
                    )
                )
        return failures

    @staticmethod
    def _overwrite_for(board_id: int, account_id: int, category: str, submitted: SubmittedTicket) -> Ticket:
        return Ticket.existing(submitted.ticket_id, board_id, account_id, category, submitted.content)

    def _rename(self, board: Board, account_id: int, new_title: str) -> None:
        assert_owner(board, account_id)
        board.rename(new_title)
        self.board_store.update(board)
