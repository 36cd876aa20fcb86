"""Board routes: list, save, read and delete."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from kpt_board.c1_board_errors.errors import BoardServiceError
from kpt_board.c2_board_service.board_service import BoardService
from kpt_board.c2_storage.sql_stores import SqlBoardStore, SqlTicketStore
from kpt_board.c3_board_routes.payloads import (
    BoardDataResponse,
    BoardSummaryResponse,
    DeleteBoardResponse,
    SaveBoardRequest,
    SaveBoardResponse,
    to_board_data,
    to_failure_payloads,
    to_save_response,
    to_snapshot,
)
from kpt_board.c3_request_context.error_mapping import status_code_for
from kpt_board.c3_request_context.user_context import UserContext, create_user_context_dependency

logger = logging.getLogger(__name__)


def create_board_router(server_state):
    """Create board router with server_state dependency.

    Args:
        server_state: ServerState instance with db_manager and session_store

    Returns:
        APIRouter: Configured router with board endpoints
    """
    router = APIRouter(prefix="/boards", tags=["boards"])
    get_user_context = create_user_context_dependency(server_state.session_store)

    def get_board_service():
        db = server_state.db_manager.get_session()
        try:
            yield BoardService(SqlBoardStore(db), SqlTicketStore(db))
        finally:
            db.close()

    @router.get("/list", response_model=List[BoardSummaryResponse])
    async def all_boards(
        user: UserContext = Depends(get_user_context),
        service: BoardService = Depends(get_board_service),
    ):
        """List the caller's boards."""
        try:
            boards = service.list_boards(user.account_id)
        except BoardServiceError as e:
            logger.error(f"Failed to list boards for account {user.account_id}: {e.message}")
            raise HTTPException(status_code=status_code_for(e), detail=e.message)
        return [BoardSummaryResponse(id=board.id, title=board.title) for board in boards]

    @router.post("/save", response_model=SaveBoardResponse)
    async def save_board_tickets(
        request: SaveBoardRequest,
        user: UserContext = Depends(get_user_context),
        service: BoardService = Depends(get_board_service),
    ):
        """Create a board (no titleId) or reconcile an existing one with the submitted tickets."""
        try:
            summary = service.save_board(user.account_id, to_snapshot(request))
        except BoardServiceError as e:
            logger.warning(f"Save rejected for account {user.account_id}: {e.message}")
            return JSONResponse(
                status_code=status_code_for(e),
                content={"message": e.message, "title": request.title, "failures": []},
            )

        response = to_save_response(summary)
        return JSONResponse(
            status_code=201 if summary.created else 200,
            content=response.model_dump(by_alias=True),
        )

    @router.get("/data/{title_id}", response_model=BoardDataResponse)
    async def get_board_data(
        title_id: int,
        user: UserContext = Depends(get_user_context),
        service: BoardService = Depends(get_board_service),
    ):
        """Get a board's tickets grouped into Keep, Problem and Try."""
        try:
            view = service.get_board_view(user.account_id, title_id)
        except BoardServiceError as e:
            logger.error(f"Error fetching board data for board {title_id}: {e.message}")
            raise HTTPException(status_code=status_code_for(e), detail=e.message)
        return to_board_data(view)

    @router.delete("/delete/{title_id}", response_model=DeleteBoardResponse)
    async def delete_board(
        title_id: int,
        user: UserContext = Depends(get_user_context),
        service: BoardService = Depends(get_board_service),
    ):
        """Soft-delete a board and its tickets."""
        try:
            summary = service.delete_board(user.account_id, title_id)
        except BoardServiceError as e:
            logger.error(f"Error deleting board {title_id}: {e.message}")
            raise HTTPException(status_code=status_code_for(e), detail=e.message)
        return DeleteBoardResponse(message=summary.message, failures=to_failure_payloads(summary.failures))

    return router
