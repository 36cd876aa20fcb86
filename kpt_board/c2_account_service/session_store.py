"""Opaque bearer-session issuance backed by the account_sessions table."""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from kpt_board.c1_account_models.account import AccountSession
from kpt_board.c1_database_session.database_manager import DatabaseManager

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 604800  # 7 days


def generate_session_token() -> str:
    """Generate a secure session token."""
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    """Hash a token for secure storage."""
    return hashlib.sha256(token.encode()).hexdigest()


class SessionToken:
    """Issued session token plus the cookie it is delivered in."""

    def __init__(self, value: str, cookie_name: str, max_age: int):
        self.value = value
        self.cookie_name = cookie_name
        self.max_age = max_age

    def cookie(self) -> str:
        return f"{self.cookie_name}={self.value}; Max-Age={self.max_age}; Path=/; HttpOnly"

    def __repr__(self) -> str:
        return f"<SessionToken {self.cookie_name} max_age={self.max_age}>"


class SessionStore:
    """Issues and resolves bearer sessions.

    Created once at startup and shared by every request.
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        cookie_name: str = "kpt_session",
    ):
        self.db_manager = db_manager
        self.ttl_seconds = ttl_seconds
        self.cookie_name = cookie_name

    def issue(self, account_id: int) -> SessionToken:
        """Create a session for an already verified account."""
        token = generate_session_token()
        now = datetime.utcnow()

        with self.db_manager.session_scope() as db:
            db.add(
                AccountSession(
                    account_id=account_id,
                    session_token_hash=hash_token(token),
                    started_at=now,
                    expires_at=now + timedelta(seconds=self.ttl_seconds),
                )
            )

        logger.info(f"[SESSION_STORE] Issued session for account {account_id}")
        return SessionToken(token, self.cookie_name, self.ttl_seconds)

    def load(self, token: str) -> Optional[int]:
        """Resolve a bearer token to its account id, or None if unknown or expired."""
        if not token:
            return None

        with self.db_manager.session_scope() as db:
            session = db.query(AccountSession).filter_by(session_token_hash=hash_token(token)).first()
            if session is None:
                return None
            if session.expires_at <= datetime.utcnow():
                logger.debug(f"[SESSION_STORE] Expired session for account {session.account_id}")
                return None
            return session.account_id
