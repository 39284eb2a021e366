from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from lottery.api.responses import ApiResponse, TicketResponse, ticket_to_response
from lottery.dependencies.tickets import get_ticket_service
from lottery.tickets.errors import TicketNotFoundError
from lottery.tickets.service import TicketService

router = APIRouter(prefix="/ticket", tags=["tickets"])

TicketServiceDep = Annotated[TicketService, Depends(get_ticket_service)]
LineCount = Annotated[
    int,
    Query(alias="numberOfLines", ge=1, description="Number of lines, at least 1"),
]


@router.post(
    "",
    response_model=ApiResponse[TicketResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new ticket",
)
async def create_ticket(service: TicketServiceDep, number_of_lines: LineCount) -> ApiResponse[TicketResponse]:
    ticket = service.create_ticket(number_of_lines)
    return ApiResponse.ok("Ticket created successfully!", ticket_to_response(ticket))


@router.get("", response_model=ApiResponse[list[TicketResponse]], summary="Get all tickets")
async def list_tickets(service: TicketServiceDep) -> ApiResponse[list[TicketResponse]]:
    tickets = service.list_tickets()
    if not tickets:
        raise TicketNotFoundError("No tickets found!")
    return ApiResponse.ok("Tickets retrieved successfully!", [ticket_to_response(ticket) for ticket in tickets])


@router.get("/{ticket_id}", response_model=ApiResponse[TicketResponse], summary="Get ticket by ID")
async def get_ticket(ticket_id: int, service: TicketServiceDep) -> ApiResponse[TicketResponse]:
    ticket = service.get_ticket(ticket_id)
    return ApiResponse.ok("Ticket retrieved successfully!", ticket_to_response(ticket))


@router.put("/{ticket_id}", response_model=ApiResponse[TicketResponse], summary="Add lines to ticket")
async def add_lines(
    ticket_id: int,
    service: TicketServiceDep,
    number_of_lines: LineCount,
) -> ApiResponse[TicketResponse]:
    ticket = service.add_lines(ticket_id, number_of_lines)
    return ApiResponse.ok("Ticket updated successfully!", ticket_to_response(ticket))


@router.put(
    "/status/{ticket_id}",
    response_model=ApiResponse[TicketResponse],
    summary="Check ticket status",
)
async def check_ticket_status(ticket_id: int, service: TicketServiceDep) -> ApiResponse[TicketResponse]:
    ticket = service.check_status(ticket_id)
    if not ticket.lines:
        raise TicketNotFoundError(f"Lines not found for ticket ID: {ticket_id}")
    return ApiResponse.ok("Ticket status retrieved successfully!", ticket_to_response(ticket))
