"""Pytest configuration and shared fixtures for the KPT board tests.

Every test gets a fresh in-memory SQLite database.
"""

import pytest

from kpt_board.c1_account_models.account import Account
from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c1_database_session.database_manager import DatabaseManager
from kpt_board.c2_board_service.board_service import BoardService
from kpt_board.c2_storage.sql_stores import SqlAccountStore, SqlBoardStore, SqlTicketStore


@pytest.fixture
def db_manager():
    """Provide an in-memory database with all tables created."""
    manager = DatabaseManager("sqlite:///:memory:")
    manager.create_tables()
    yield manager
    manager.drop_tables()
    manager.engine.dispose()


@pytest.fixture
def db_session(db_manager):
    session = db_manager.get_session()
    yield session
    session.close()


@pytest.fixture
def account_store(db_session):
    return SqlAccountStore(db_session)


@pytest.fixture
def board_store(db_session):
    return SqlBoardStore(db_session)


@pytest.fixture
def ticket_store(db_session):
    return SqlTicketStore(db_session)


@pytest.fixture
def board_service(board_store, ticket_store):
    return BoardService(board_store, ticket_store)


def _make_account(account_store, display_name):
    # Placeholder hash; board tests never log in
    account = Account(display_name=display_name, hashed_password="not-a-real-hash")
    account_store.store(account)
    return account.id


@pytest.fixture
def owner_id(account_store):
    """ID of the account that owns seeded boards."""
    return _make_account(account_store, "owner")


@pytest.fixture
def other_id(account_store):
    """ID of an authenticated account that owns nothing."""
    return _make_account(account_store, "someone-else")


@pytest.fixture
def make_board(board_store, ticket_store):
    """Factory seeding a board and its tickets directly through the stores.

    Usage:
        board_id, ticket_ids = make_board(owner_id, [("Keep", "A")], board_id=7, ticket_ids=[12])
    """

    def _make_board(created_by, tickets=(), title="Retro", board_id=None, ticket_ids=None, deleted=False):
        board = Board.create(title, created_by)
        if board_id is not None:
            board.id = board_id
        if deleted:
            board.mark_deleted()
        stored_board_id = board_store.store(board)

        stored_ticket_ids = []
        for index, (category, content) in enumerate(tickets):
            ticket = Ticket.create(stored_board_id, created_by, category, content)
            if ticket_ids is not None:
                ticket.id = ticket_ids[index]
            ticket_store.store(ticket)
            stored_ticket_ids.append(ticket.id)

        return stored_board_id, stored_ticket_ids

    return _make_board


@pytest.fixture
def live_tickets(ticket_store):
    """Return a board's non-deleted tickets as sorted (category, content) pairs."""

    def _live_tickets(board_id):
        return sorted((ticket.category, ticket.content) for ticket in ticket_store.find_by_board_id(board_id))

    return _live_tickets
