"""Transient board schemas: submitted snapshots, summaries and views."""

from kpt_board.c1_board_schemas.snapshot import (
    NewTicket,
    ExistingTicket,
    TicketRef,
    SubmittedTicket,
    SubmittedList,
    BoardSnapshot,
)
from kpt_board.c1_board_schemas.results import (
    TicketFailure,
    SaveSummary,
    DeleteSummary,
    TicketView,
    CategoryListView,
    BoardView,
    BoardSummary,
)

__all__ = [
    "NewTicket",
    "ExistingTicket",
    "TicketRef",
    "SubmittedTicket",
    "SubmittedList",
    "BoardSnapshot",
    "TicketFailure",
    "SaveSummary",
    "DeleteSummary",
    "TicketView",
    "CategoryListView",
    "BoardView",
    "BoardSummary",
]
