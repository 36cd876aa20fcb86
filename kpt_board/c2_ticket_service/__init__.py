"""Ticket service for the KPT board backend."""

from kpt_board.c2_ticket_service.ticket_service import TicketService

__all__ = ["TicketService"]
