"""Board-related enums for the KPT board backend."""

from enum import Enum


class TicketCategory(Enum):
    """Enum for the fixed retrospective ticket categories."""
    KEEP = "Keep"
    PROBLEM = "Problem"
    TRY = "Try"


# Order in which categories are rendered back to clients
CATEGORY_ORDER = [TicketCategory.KEEP, TicketCategory.PROBLEM, TicketCategory.TRY]
