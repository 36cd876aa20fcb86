"""Storage protocols and SQLAlchemy-backed stores."""

from kpt_board.c2_storage.protocols import AccountStore, BoardStore, TicketStore
from kpt_board.c2_storage.sql_stores import SqlAccountStore, SqlBoardStore, SqlTicketStore

__all__ = [
    "AccountStore",
    "BoardStore",
    "TicketStore",
    "SqlAccountStore",
    "SqlBoardStore",
    "SqlTicketStore",
]
