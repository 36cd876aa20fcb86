"""Service layer for single-ticket operations.

Callers are expected to have authorized the containing board before calling
in here; the ticket store additionally scopes updates to the ticket's board.
"""

import logging
from typing import List

from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c1_board_errors.errors import InvalidInputError, NotFoundError
from kpt_board.c2_storage.protocols import TicketStore

logger = logging.getLogger(__name__)


class TicketService:
    """Service for managing ticket operations."""

    def __init__(self, ticket_store: TicketStore):
        self.ticket_store = ticket_store

    def get_all_tickets(self, board_id: int) -> List[Ticket]:
        """
        Get every non-deleted ticket of a board.

        Args:
            board_id: ID of the board

        Returns:
            Tickets in storage order

        Raises:
            StorageFailureError: If the lookup fails
        """
        return self.ticket_store.find_by_board_id(board_id)

    def save_ticket(self, ticket: Ticket) -> None:
        """
        Persist a new ticket.

        Raises:
            InvalidInputError: If the ticket already carries an id
            StorageFailureError: If the insert fails
        """
        if ticket.id is not None:
            raise InvalidInputError("Ticket ID should not be set for new tickets")
        self.ticket_store.store(ticket)
        logger.debug(f"[TICKET_SERVICE] Created ticket on board {ticket.board_id} ({ticket.category})")

    def update_ticket(self, ticket: Ticket) -> None:
        """
        Overwrite an existing ticket's category and content.

        Raises:
            InvalidInputError: If the ticket has no id
            StorageFailureError: If no live ticket with that id exists on the board
        """
        if ticket.id is None:
            raise InvalidInputError("Ticket ID is required for update")
        self.ticket_store.update(ticket)
        logger.debug(f"[TICKET_SERVICE] Updated ticket {ticket.id}")

    def delete_ticket(self, ticket_id: int) -> None:
        """
        Soft-delete a ticket.

        Raises:
            NotFoundError: If the ticket does not exist or is already deleted
            StorageFailureError: If the delete fails
        """
        ticket = self.ticket_store.find(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found")
        self.ticket_store.delete(ticket_id)
        logger.debug(f"[TICKET_SERVICE] Deleted ticket {ticket_id}")
