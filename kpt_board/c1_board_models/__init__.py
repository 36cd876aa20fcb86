"""Board and ticket models for the KPT board backend."""

from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket

__all__ = ["Board", "Ticket"]
