"""Store protocols consumed by the board, ticket and account services.

Implementations raise StorageFailureError when the underlying call fails.
"""

from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from kpt_board.c1_account_models.account import Account
from kpt_board.c1_board_models.board import Board
from kpt_board.c1_board_models.ticket import Ticket


@runtime_checkable
class AccountStore(Protocol):
    """Protocol for account storage."""

    def find_by_display_name(self, display_name: str) -> Optional[Account]:
        """Get account by its unique display name."""
        ...

    def find_many(self, ids: Iterable[int]) -> Dict[int, Account]:
        """Get accounts keyed by id. Unknown ids are skipped."""
        ...

    def store(self, account: Account) -> int:
        """Persist a new account and return its id."""
        ...


@runtime_checkable
class BoardStore(Protocol):
    """Protocol for board storage."""

    def find(self, board_id: int) -> Optional[Board]:
        """Get board by id, soft-deleted boards included."""
        ...

    def find_by_user_id(self, account_id: int) -> List[Board]:
        """List non-deleted boards created by the account."""
        ...

    def find_by_board_id(self, board_id: int) -> List[Board]:
        """List the non-deleted board with this id (zero or one element)."""
        ...

    def find_by_title(self, title: str) -> List[Board]:
        """List boards with exactly this title."""
        ...

    def store(self, board: Board) -> int:
        """Persist a new board and return its id."""
        ...

    def update(self, board: Board) -> None:
        """Write the board's title."""
        ...

    def delete(self, board_id: int) -> None:
        """Soft-delete the board."""
        ...


@runtime_checkable
class TicketStore(Protocol):
    """Protocol for ticket storage."""

    def find(self, ticket_id: int) -> Optional[Ticket]:
        """Get a non-deleted ticket by id."""
        ...

    def find_by_board_id(self, board_id: int) -> List[Ticket]:
        """List non-deleted tickets of a board in storage order."""
        ...

    def store(self, ticket: Ticket) -> None:
        """Insert a new ticket."""
        ...

    def update(self, ticket: Ticket) -> None:
        """Overwrite category and content of a live ticket on the same board."""
        ...

    def delete(self, ticket_id: int) -> None:
        """Soft-delete the ticket."""
        ...
