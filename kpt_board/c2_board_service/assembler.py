"""Reshape persisted tickets into the categorized board view."""

from typing import Iterable

from kpt_board.c1_board_enums.board_enums import CATEGORY_ORDER
from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c1_board_schemas.results import BoardView, CategoryListView, TicketView


def assemble(board: Board, tickets: Iterable[Ticket]) -> BoardView:
    """
    Group tickets into one list per category, in Keep/Problem/Try order.

    Ticket order inside a category follows the order of ``tickets``. Tickets
    whose category is outside the fixed set are left out of the view.

    Args:
        board: Board the tickets belong to
        tickets: Persisted tickets, typically in storage order

    Returns:
        BoardView with exactly one list per category
    """
    tickets = list(tickets)
    lists = []
    for category in CATEGORY_ORDER:
        lists.append(
            CategoryListView(
                id=category.value,
                category=category.value,
                tickets=[
                    TicketView(id=ticket.id, content=ticket.content)
                    for ticket in tickets
                    if ticket.category == category.value
                ],
            )
        )

    return BoardView(id=board.id, title=board.title, lists=lists)
