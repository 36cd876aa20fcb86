"""Resolve the authenticated account from an ``Authorization: Bearer`` header."""

import logging
from typing import Optional

from fastapi import Header, HTTPException
from pydantic import BaseModel

from kpt_board.c2_account_service.session_store import SessionStore

logger = logging.getLogger(__name__)


class UserContext(BaseModel):
    """Authenticated caller of a board route."""

    account_id: int


def create_user_context_dependency(session_store: SessionStore):
    """Create a FastAPI dependency that yields the caller's UserContext.

    Args:
        session_store: Long-lived store used to resolve bearer tokens

    Returns:
        Dependency callable raising 401 for missing, malformed or expired tokens
    """

    def get_user_context(authorization: Optional[str] = Header(None)) -> UserContext:
        if not authorization:
            raise HTTPException(status_code=401, detail="Unauthorized")

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise HTTPException(status_code=401, detail="Unauthorized")

        account_id = session_store.load(token.strip())
        if account_id is None:
            logger.info("Rejected request with unknown or expired session token")
            raise HTTPException(status_code=401, detail="Unauthorized")

        return UserContext(account_id=account_id)

    return get_user_context
