"""Ticket domain models and services."""

from .errors import (
    ErrorCode,
    InvalidInputError,
    NotModifiableError,
    TicketNotCreatedError,
    TicketNotFoundError,
    TicketServiceError,
)
from .generator import LineGenerator
from .models import Line, Ticket
from .repository import TicketRepository
from .scoring import score_line
from .service import TicketService
from .state import TicketStateMachine, TicketStatus

__all__ = [
    "ErrorCode",
    "InvalidInputError",
    "Line",
    "LineGenerator",
    "NotModifiableError",
    "Ticket",
    "TicketNotCreatedError",
    "TicketNotFoundError",
    "TicketRepository",
    "TicketService",
    "TicketServiceError",
    "TicketStateMachine",
    "TicketStatus",
    "score_line",
]
