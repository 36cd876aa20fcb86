"""Service layer for account sign-up and login."""

import logging
from typing import Optional

from kpt_board.c1_account_models.account import Account
from kpt_board.c1_account_models.passwords import MAX_PASSWORD_BYTES
from kpt_board.c1_board_errors.errors import AccountExistsError, InvalidInputError
from kpt_board.c2_account_service.session_store import SessionStore, SessionToken
from kpt_board.c2_storage.protocols import AccountStore

logger = logging.getLogger(__name__)


class AccountService:
    """Service for account operations."""

    def __init__(self, account_store: AccountStore, session_store: SessionStore):
        self.account_store = account_store
        self.session_store = session_store

    def create_account(self, display_name: str, password: str) -> Account:
        """
        Sign up a new account.

        Args:
            display_name: Unique public name, also used to log in
            password: Plaintext password, hashed before storage

        Returns:
            The persisted account

        Raises:
            InvalidInputError: If the name is blank or the password is empty or too long
            AccountExistsError: If the display name is already taken
        """
        display_name = display_name.strip()
        if not display_name:
            raise InvalidInputError("display_name must not be empty")
        if not password:
            raise InvalidInputError("password must not be empty")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")

        if self.account_store.find_by_display_name(display_name) is not None:
            raise AccountExistsError(f"Display name already taken: {display_name}")

        account = Account.create(password, display_name)
        self.account_store.store(account)
        logger.info(f"[ACCOUNT_SERVICE] Created account {account.id} ({display_name})")
        return account

    def create_session(self, display_name: str, password: str) -> Optional[SessionToken]:
        """Verify credentials and issue a session token, or return None."""
        account = self.account_store.find_by_display_name(display_name)
        if account is None or not account.matches_password(password):
            logger.info(f"[ACCOUNT_SERVICE] Login rejected for {display_name!r}")
            return None

        return self.session_store.issue(account.id)
