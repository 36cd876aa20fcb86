"""Submitted board snapshot models.

A snapshot is the client's full view of a board's tickets. Each submitted
ticket carries an explicit reference: ``NewTicket`` for rows that do not exist
yet, ``ExistingTicket`` for rows to overwrite, or ``None`` when the client
sent no identifier at all.
"""

from typing import Annotated, Iterator, List, Literal, Optional, Set, Tuple, Union
from pydantic import BaseModel, Field


class NewTicket(BaseModel):
    """Reference to a ticket that has not been persisted yet."""

    kind: Literal["new"] = "new"


class ExistingTicket(BaseModel):
    """Reference to an already persisted ticket."""

    kind: Literal["existing"] = "existing"
    ticket_id: int = Field(..., description="Identifier assigned by storage")


TicketRef = Optional[Annotated[Union[NewTicket, ExistingTicket], Field(discriminator="kind")]]


class SubmittedTicket(BaseModel):
    """A single ticket as submitted by the client."""

    content: str = Field(..., description="Free-text ticket content")
    ref: TicketRef = Field(None, description="New, existing or unidentified")

    @property
    def is_new(self) -> bool:
        return isinstance(self.ref, NewTicket)

    @property
    def ticket_id(self) -> Optional[int]:
        if isinstance(self.ref, ExistingTicket):
            return self.ref.ticket_id
        return None


class SubmittedList(BaseModel):
    """Tickets submitted under one category."""

    category: str = Field(..., description="Category name, normally Keep/Problem/Try")
    tickets: List[SubmittedTicket] = Field(default_factory=list)


class BoardSnapshot(BaseModel):
    """Full client-submitted state of a board."""

    title: str = Field(..., description="Board title")
    board_id: Optional[str] = Field(None, description="Raw board identifier; absent means create")
    lists: List[SubmittedList] = Field(default_factory=list)

    def iter_tickets(self) -> Iterator[Tuple[str, SubmittedTicket]]:
        """Yield (category, ticket) pairs in submission order."""
        for submitted_list in self.lists:
            for ticket in submitted_list.tickets:
                yield submitted_list.category, ticket

    def received_ids(self) -> Set[int]:
        """Identifiers of every existing ticket referenced by the snapshot."""
        return {
            ticket.ticket_id
            for _, ticket in self.iter_tickets()
            if ticket.ticket_id is not None
        }
