"""Tests for the SQLAlchemy board and ticket stores and storage error translation."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from kpt_board.c1_board_errors.errors import StorageFailureError
from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c2_storage.protocols import BoardStore


class TestSqlBoardStore:
    def test_satisfies_protocol(self, board_store):
        assert isinstance(board_store, BoardStore)

    def test_find_includes_deleted(self, board_store, owner_id, make_board):
        board_id, _ = make_board(owner_id, deleted=True)

        assert board_store.find(board_id).is_deleted
        assert board_store.find_by_board_id(board_id) == []

    def test_find_by_board_id(self, board_store, owner_id, make_board):
        board_id, _ = make_board(owner_id, title="Only")

        assert [b.title for b in board_store.find_by_board_id(board_id)] == ["Only"]

    def test_find_by_title(self, board_store, owner_id, other_id, make_board):
        first_id, _ = make_board(owner_id, title="Sprint 9")
        second_id, _ = make_board(other_id, title="Sprint 9")
        make_board(owner_id, title="Sprint 10")

        assert [b.id for b in board_store.find_by_title("Sprint 9")] == [first_id, second_id]

    def test_update_writes_title(self, board_store, owner_id, make_board):
        board_id, _ = make_board(owner_id, title="Old")
        board = board_store.find(board_id)

        board.rename("New")
        board_store.update(board)

        assert board_store.find(board_id).title == "New"

    def test_update_without_id(self, board_store, owner_id):
        with pytest.raises(StorageFailureError) as exc_info:
            board_store.update(Board.create("Unsaved", owner_id))
        assert exc_info.value.message == "Board ID is not set"

    def test_update_unknown_board(self, board_store, owner_id):
        board = Board.create("Ghost", owner_id)
        board.id = 777

        with pytest.raises(StorageFailureError):
            board_store.update(board)

    def test_delete_marks_board_deleted(self, board_store, owner_id, make_board):
        board_id, _ = make_board(owner_id)

        with patch.object(Board, "mark_deleted", autospec=True, side_effect=Board.mark_deleted) as mark_spy:
            board_store.delete(board_id)

        mark_spy.assert_called_once()
        assert board_store.find(board_id).is_deleted
        assert board_store.find_by_user_id(owner_id) == []

    def test_delete_unknown_board(self, board_store):
        with pytest.raises(StorageFailureError):
            board_store.delete(777)

    def test_database_errors_become_storage_failures(self, board_store, db_session, owner_id):
        error = OperationalError("SELECT 1", {}, Exception("database is locked"))

        with patch.object(db_session, "query", side_effect=error):
            with pytest.raises(StorageFailureError) as exc_info:
                board_store.find_by_user_id(owner_id)

        assert exc_info.value.message.startswith("Failed to list boards: ")


class TestSqlTicketStore:
    def test_update_revises_stored_row(self, ticket_store, owner_id, make_board):
        board_id, (ticket_id,) = make_board(owner_id, [("Problem", "before")])
        stamped = ticket_store.find(ticket_id).updated_at

        with patch.object(Ticket, "revise", autospec=True, side_effect=Ticket.revise) as revise_spy:
            ticket_store.update(Ticket.existing(ticket_id, board_id, owner_id, "Try", "after"))

        revise_spy.assert_called_once()
        stored = ticket_store.find(ticket_id)
        assert (stored.category, stored.content) == ("Try", "after")
        assert stored.updated_at >= stamped

    def test_delete_marks_row_deleted(self, ticket_store, db_session, owner_id, make_board):
        _, (ticket_id,) = make_board(owner_id, [("Keep", "x")])

        ticket_store.delete(ticket_id)

        assert ticket_store.find(ticket_id) is None
        assert db_session.get(Ticket, ticket_id).is_deleted

    def test_delete_unknown_ticket(self, ticket_store):
        with pytest.raises(StorageFailureError):
            ticket_store.delete(404)

    def test_oversized_id_becomes_storage_failure(self, ticket_store, owner_id, make_board):
        board_id, (ticket_id,) = make_board(owner_id, [("Keep", "x")])

        with pytest.raises(StorageFailureError) as exc_info:
            ticket_store.update(Ticket.existing(2 ** 70, board_id, owner_id, "Keep", "too big"))
        assert exc_info.value.message.startswith("Failed to update ticket: ")

        with pytest.raises(StorageFailureError):
            ticket_store.find(2 ** 70)

        # Session stays usable after the failed call
        assert ticket_store.find(ticket_id).content == "x"
