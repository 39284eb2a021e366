from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes exposed to API clients."""

    TICKET_NOT_FOUND = "ERR-001"
    INVALID_INPUT = "ERR-002"
    NOT_MODIFIABLE = "ERR-003"
    TICKET_NOT_CREATED = "ERR-004"
    INTERNAL_SERVER_ERROR = "ERR-500"

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES: dict[ErrorCode, str] = {
    ErrorCode.TICKET_NOT_FOUND: "Ticket Not Found",
    ErrorCode.INVALID_INPUT: "Invalid Input",
    ErrorCode.NOT_MODIFIABLE: "Not Modifiable",
    ErrorCode.TICKET_NOT_CREATED: "Ticket Not Created",
    ErrorCode.INTERNAL_SERVER_ERROR: "Unexpected Error",
}


class TicketServiceError(RuntimeError):
    """Base error for ticket service issues."""

    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    @property
    def detail(self) -> str:
        return str(self) or self.code.title


class TicketNotFoundError(TicketServiceError):
    """Raised when a ticket could not be located."""

    code = ErrorCode.TICKET_NOT_FOUND


class NotModifiableError(TicketServiceError):
    """Raised when lines are appended to a checked ticket."""

    code = ErrorCode.NOT_MODIFIABLE


class TicketNotCreatedError(TicketServiceError):
    """Raised when a ticket could not be allocated or stored."""

    code = ErrorCode.TICKET_NOT_CREATED


class InvalidInputError(TicketServiceError, ValueError):
    """Raised when an operation receives arguments outside their domain."""

    code = ErrorCode.INVALID_INPUT
