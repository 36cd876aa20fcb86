"""Account routes: sign-up and login."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from kpt_board.c1_board_errors.errors import BoardServiceError
from kpt_board.c2_account_service.account_service import AccountService
from kpt_board.c2_storage.sql_stores import SqlAccountStore
from kpt_board.c3_request_context.error_mapping import status_code_for

logger = logging.getLogger(__name__)


class SignUpRequest(BaseModel):
    display_name: str = Field(..., description="Unique display name")
    password: str = Field(..., description="Plaintext password")


class SignInRequest(BaseModel):
    display_name: str = Field(..., description="Display name used at sign-up")
    password: str = Field(..., description="Plaintext password")


class MessageResponse(BaseModel):
    message: str


class SignInResponse(BaseModel):
    message: str
    token: str


def create_account_router(server_state):
    """Create account router with server_state dependency.

    Args:
        server_state: ServerState instance with db_manager and session_store

    Returns:
        APIRouter: Configured router with account endpoints
    """
    router = APIRouter(prefix="/accounts", tags=["accounts"])

    def get_account_service():
        db = server_state.db_manager.get_session()
        try:
            yield AccountService(SqlAccountStore(db), server_state.session_store)
        finally:
            db.close()

    @router.post("/new", status_code=201, response_model=MessageResponse)
    async def sign_up(
        request: SignUpRequest,
        service: AccountService = Depends(get_account_service),
    ):
        """Create a new account."""
        try:
            service.create_account(request.display_name, request.password)
        except BoardServiceError as e:
            return JSONResponse(status_code=status_code_for(e), content={"message": e.message})
        return MessageResponse(message="Account created successfully")

    @router.post("/session", response_model=SignInResponse)
    async def api_login(
        request: SignInRequest,
        service: AccountService = Depends(get_account_service),
    ):
        """Log in and receive a bearer token (also set as an HttpOnly cookie)."""
        token = service.create_session(request.display_name, request.password)
        if token is None:
            return JSONResponse(status_code=401, content={"message": "Login failed"})

        return JSONResponse(
            content={"message": "Login succeeded", "token": token.value},
            headers={"Set-Cookie": token.cookie()},
        )

    return router
