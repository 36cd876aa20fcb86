"""Result models returned by the board services."""

from typing import List, Optional
from pydantic import BaseModel, Field


class TicketFailure(BaseModel):
    """A ticket-level operation that failed without aborting the request."""

    ticket_id: Optional[int] = Field(None, description="Ticket id, absent for tickets being created")
    content: Optional[str] = Field(None, description="Submitted content, when known")
    operation: str = Field(..., description="create, update or delete")
    error: str = Field(..., description="Error message from the failed call")

    def describe(self) -> str:
        if self.operation == "create" and self.ticket_id is None:
            return f"Failed to save ticket '{self.content}': {self.error}"
        return f"Ticket {self.ticket_id} failed: {self.error}"


class SaveSummary(BaseModel):
    """Outcome of a create-or-update board request."""

    board_id: int
    title: str
    created: bool
    message: str
    failures: List[TicketFailure] = Field(default_factory=list)
    deletion_failures: List[TicketFailure] = Field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.failures)


class DeleteSummary(BaseModel):
    """Outcome of a board deletion cascade."""

    board_id: int
    message: str
    failures: List[TicketFailure] = Field(default_factory=list)


class TicketView(BaseModel):
    id: Optional[int]
    content: str


class CategoryListView(BaseModel):
    id: str
    category: str
    tickets: List[TicketView] = Field(default_factory=list)


class BoardView(BaseModel):
    """Categorized read view of a board."""

    id: int
    title: str
    lists: List[CategoryListView] = Field(default_factory=list)


class BoardSummary(BaseModel):
    id: int
    title: str
