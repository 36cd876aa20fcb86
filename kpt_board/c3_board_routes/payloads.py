"""Wire models for the board routes and adapters to the service schemas.

The wire format marks new tickets with ``id: 0``; the adapters translate that
into an explicit ``NewTicket`` reference so nothing below the routes sees the
sentinel.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field

from kpt_board.c1_board_schemas.results import BoardView, SaveSummary, TicketFailure
from kpt_board.c1_board_schemas.snapshot import (
    BoardSnapshot,
    ExistingTicket,
    NewTicket,
    SubmittedList,
    SubmittedTicket,
    TicketRef,
)

NEW_TICKET_WIRE_ID = 0


class TicketPayload(BaseModel):
    id: Optional[int] = Field(None, description="0 for new tickets, the stored id otherwise")
    content: str = Field("", description="Ticket content")


class ListPayload(BaseModel):
    id: Optional[str] = Field(None, description="List identifier, usually the category")
    category: str = Field(..., description="Keep, Problem or Try")
    tickets: List[TicketPayload] = Field(default_factory=list)


class ProjectData(BaseModel):
    id: Optional[str] = Field(None, description="Board id as a string")
    lists: List[ListPayload] = Field(default_factory=list)


class SaveBoardRequest(BaseModel):
    """Request model for creating or updating a board."""

    title: str = Field(..., description="Board title")
    title_id: Optional[Union[int, str]] = Field(
        None, alias="titleId", description="Board id; omit to create a new board"
    )
    project_data: ProjectData = Field(default_factory=ProjectData, alias="projectData")

    model_config = {"populate_by_name": True}


class TicketFailurePayload(BaseModel):
    id: Optional[int] = None
    content: Optional[str] = None
    operation: str
    error: str


class SaveBoardResponse(BaseModel):
    """Response model for board save."""

    message: str
    title: str
    title_id: Optional[str] = Field(None, serialization_alias="titleId")
    failures: List[TicketFailurePayload] = Field(default_factory=list)


class BoardSummaryResponse(BaseModel):
    id: int
    title: str


class BoardDataResponse(BaseModel):
    """Categorized board returned to clients."""

    id: int
    title: str
    project_data: ProjectData = Field(..., serialization_alias="projectData")


class DeleteBoardResponse(BaseModel):
    message: str
    failures: List[TicketFailurePayload] = Field(default_factory=list)


def to_ticket_ref(wire_id: Optional[int]) -> TicketRef:
    if wire_id is None:
        return None
    if wire_id == NEW_TICKET_WIRE_ID:
        return NewTicket()
    return ExistingTicket(ticket_id=wire_id)


def to_snapshot(request: SaveBoardRequest) -> BoardSnapshot:
    """Map a save request onto a BoardSnapshot."""
    board_id = None if request.title_id is None else str(request.title_id)
    return BoardSnapshot(
        title=request.title,
        board_id=board_id,
        lists=[
            SubmittedList(
                category=wire_list.category,
                tickets=[
                    SubmittedTicket(content=ticket.content, ref=to_ticket_ref(ticket.id))
                    for ticket in wire_list.tickets
                ],
            )
            for wire_list in request.project_data.lists
        ],
    )


def to_failure_payloads(failures: List[TicketFailure]) -> List[TicketFailurePayload]:
    return [
        TicketFailurePayload(
            id=failure.ticket_id,
            content=failure.content,
            operation=failure.operation,
            error=failure.error,
        )
        for failure in failures
    ]


def to_save_response(summary: SaveSummary) -> SaveBoardResponse:
    return SaveBoardResponse(
        message=summary.message,
        title=summary.title,
        title_id=str(summary.board_id),
        failures=to_failure_payloads(summary.failures),
    )


def to_board_data(view: BoardView) -> BoardDataResponse:
    """Map a BoardView onto the wire structure the client submits back."""
    return BoardDataResponse(
        id=view.id,
        title=view.title,
        project_data=ProjectData(
            id=str(view.id),
            lists=[
                ListPayload(
                    id=category_list.id,
                    category=category_list.category,
                    tickets=[
                        TicketPayload(id=ticket.id, content=ticket.content)
                        for ticket in category_list.tickets
                    ],
                )
                for category_list in view.lists
            ],
        ),
    )
