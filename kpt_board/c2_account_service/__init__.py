"""Account sign-up, login and session issuance."""

from kpt_board.c2_account_service.account_service import AccountService
from kpt_board.c2_account_service.session_store import SessionStore, SessionToken, hash_token

__all__ = ["AccountService", "SessionStore", "SessionToken", "hash_token"]
