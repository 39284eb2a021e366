from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from lottery.tickets.models import Line, Ticket

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every payload returned by the API."""

    success: bool
    message: str
    data: T | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def ok(cls, message: str, data: T) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, message=message, data=None)


class LineResponse(BaseModel):
    numbers: list[int]
    result: int


class TicketResponse(BaseModel):
    id: int
    lines: list[LineResponse]
    checked: bool


def line_to_response(line: Line) -> LineResponse:
    return LineResponse(numbers=list(line.numbers), result=line.score)


def ticket_to_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        lines=[line_to_response(line) for line in ticket.lines],
        checked=ticket.checked,
    )
