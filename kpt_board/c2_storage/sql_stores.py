"""SQLAlchemy implementations of the store protocols.

Every mutating call commits on its own. A failed call is rolled back and
reported as StorageFailureError, leaving earlier calls in place. Ids too
large for the driver to bind are reported the same way.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from kpt_board.c1_account_models.account import Account
from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket
from kpt_board.c1_board_errors.errors import AccountExistsError, StorageFailureError

logger = logging.getLogger(__name__)


@contextmanager
def _storage_call(session: Session, failure_message: str):
    """Translate SQLAlchemy and driver overflow errors into StorageFailureError after rolling back."""
    try:
        yield
    except (SQLAlchemyError, OverflowError) as e:
        session.rollback()
        logger.error(f"[STORAGE] {failure_message}: {e}")
        raise StorageFailureError(f"{failure_message}: {e}") from e


class SqlAccountStore:
    """Account store backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_display_name(self, display_name: str) -> Optional[Account]:
        with _storage_call(self.session, "Failed to load account"):
            return self.session.query(Account).filter_by(display_name=display_name).first()

    def find_many(self, ids: Iterable[int]) -> Dict[int, Account]:
        ids = set(ids)
        if not ids:
            return {}
        with _storage_call(self.session, "Failed to load accounts"):
            accounts = self.session.query(Account).filter(Account.id.in_(ids)).all()
        return {account.id: account for account in accounts}

    def store(self, account: Account) -> int:
        try:
            self.session.add(account)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise AccountExistsError(f"Display name already taken: {account.display_name}") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageFailureError(f"Failed to store account: {e}") from e
        return account.id


class SqlBoardStore:
    """Board store backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find(self, board_id: int) -> Optional[Board]:
        with _storage_call(self.session, "Failed to load board"):
            return self.session.query(Board).filter_by(id=board_id).first()

    def find_by_user_id(self, account_id: int) -> List[Board]:
        with _storage_call(self.session, "Failed to list boards"):
            return (
                self.session.query(Board)
                .filter_by(created_by=account_id, deleted=False)
                .order_by(Board.id)
                .all()
            )

    def find_by_board_id(self, board_id: int) -> List[Board]:
        with _storage_call(self.session, "Failed to load board"):
            return self.session.query(Board).filter_by(id=board_id, deleted=False).all()

    def find_by_title(self, title: str) -> List[Board]:
        with _storage_call(self.session, "Failed to search boards"):
            return self.session.query(Board).filter_by(title=title).order_by(Board.id).all()

    def store(self, board: Board) -> int:
        with _storage_call(self.session, "Failed to store board"):
            self.session.add(board)
            self.session.commit()
            return board.id

    def update(self, board: Board) -> None:
        if board.id is None:
            raise StorageFailureError("Board ID is not set")

        with _storage_call(self.session, "Failed to update board"):
            updated = (
                self.session.query(Board)
                .filter(Board.id == board.id)
                .update(
                    {Board.title: board.title, Board.updated_at: datetime.utcnow()},
                    synchronize_session=False,
                )
            )
            self.session.commit()

        if updated == 0:
            raise StorageFailureError(f"Failed to update board: board {board.id} does not exist")

    def delete(self, board_id: int) -> None:
        with _storage_call(self.session, "Failed to delete board"):
            board = self.session.query(Board).filter(Board.id == board_id).first()
            if board is not None:
                board.mark_deleted()
                self.session.commit()

        if board is None:
            raise StorageFailureError(f"Failed to delete board: board {board_id} does not exist")


class SqlTicketStore:
    """Ticket store backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find(self, ticket_id: int) -> Optional[Ticket]:
        with _storage_call(self.session, "Failed to load ticket"):
            return self.session.query(Ticket).filter_by(id=ticket_id, deleted=False).first()

    def find_by_board_id(self, board_id: int) -> List[Ticket]:
        with _storage_call(self.session, "Failed to list tickets"):
            return (
                self.session.query(Ticket)
                .filter_by(board_id=board_id, deleted=False)
                .order_by(Ticket.id)
                .all()
            )

    def store(self, ticket: Ticket) -> None:
        with _storage_call(self.session, "Failed to store ticket"):
            self.session.add(ticket)
            self.session.commit()

    def update(self, ticket: Ticket) -> None:
        if ticket.id is None:
            raise StorageFailureError("Ticket ID is not set")

        # Scoped to the board so an id from another board cannot be overwritten
        with _storage_call(self.session, "Failed to update ticket"):
            stored = (
                self.session.query(Ticket)
                .filter(
                    Ticket.id == ticket.id,
                    Ticket.board_id == ticket.board_id,
                    Ticket.deleted.is_(False),
                )
                .first()
            )
            if stored is not None:
                stored.revise(ticket.category, ticket.content)
                self.session.commit()

        if stored is None:
            raise StorageFailureError(
                f"Failed to update ticket: ticket {ticket.id} does not exist on board {ticket.board_id}"
            )

    def delete(self, ticket_id: int) -> None:
        with _storage_call(self.session, "Failed to delete ticket"):
            stored = self.session.query(Ticket).filter(Ticket.id == ticket_id).first()
            if stored is not None:
                stored.mark_deleted()
                self.session.commit()

        if stored is None:
            raise StorageFailureError(f"Failed to delete ticket: ticket {ticket_id} does not exist")
