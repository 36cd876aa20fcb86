"""Board-related enums."""

from kpt_board.c1_board_enums.board_enums import TicketCategory, CATEGORY_ORDER

__all__ = ["TicketCategory", "CATEGORY_ORDER"]
