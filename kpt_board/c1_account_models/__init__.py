"""Account and session models for the KPT board backend."""

from kpt_board.c1_account_models.account import Account, AccountSession
from kpt_board.c1_account_models.passwords import hash_password, verify_password, MAX_PASSWORD_BYTES

__all__ = [
    "Account",
    "AccountSession",
    "hash_password",
    "verify_password",
    "MAX_PASSWORD_BYTES",
]
