from __future__ import annotations

import logging
from dataclasses import dataclass, field

from opentelemetry import trace

from .errors import InvalidInputError, TicketNotFoundError
from .generator import LineGenerator
from .models import Ticket
from .repository import TicketRepository

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def _validate_line_count(line_count: int) -> int:
    if isinstance(line_count, bool) or not isinstance(line_count, int):
        raise InvalidInputError(f"Number of lines must be an integer, got {line_count!r}")
    if line_count < 1:
        raise InvalidInputError(f"Number of lines must be at least 1, got {line_count}")
    return line_count


@dataclass(slots=True)
class TicketService:
    """High level orchestration for ticket lifecycle operations."""

    repository: TicketRepository
    generator: LineGenerator = field(default_factory=LineGenerator)

    def create_ticket(self, line_count: int) -> Ticket:
        _validate_line_count(line_count)
        with tracer.start_as_current_span("tickets.create") as span:
            lines = self.generator.generate(line_count)
            ticket = self.repository.create_ticket(lines)
            span.set_attribute("ticket.id", ticket.id)
            span.set_attribute("ticket.line_count", line_count)
        logger.info("Created ticket %s with %d lines", ticket.id, line_count)
        return ticket

    def list_tickets(self) -> list[Ticket]:
        with tracer.start_as_current_span("tickets.list"):
            return self.repository.list_tickets()

    def get_ticket(self, ticket_id: int) -> Ticket:
        with tracer.start_as_current_span("tickets.get") as span:
            span.set_attribute("ticket.id", ticket_id)
            ticket = self.repository.get_ticket(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(f"Ticket not found for ID: {ticket_id}")
        return ticket

    def add_lines(self, ticket_id: int, line_count: int) -> Ticket:
        _validate_line_count(line_count)
        with tracer.start_as_current_span("tickets.add_lines") as span:
            span.set_attribute("ticket.id", ticket_id)
            span.set_attribute("ticket.line_count", line_count)
            lines = self.generator.generate(line_count)
            updated = self.repository.update_ticket(ticket_id, lambda ticket: ticket.with_lines(lines))
        if updated is None:
            raise TicketNotFoundError(f"Ticket not found for ID: {ticket_id}")
        logger.info("Added %d lines to ticket %s (%d total)", line_count, ticket_id, len(updated.lines))
        return updated

    def check_status(self, ticket_id: int) -> Ticket:
        """Freeze the ticket and return it with lines sorted by score.

        Checking an already checked ticket is allowed and returns the same
        ordering again.
        """

        with tracer.start_as_current_span("tickets.check_status") as span:
            span.set_attribute("ticket.id", ticket_id)
            updated = self.repository.update_ticket(ticket_id, Ticket.mark_checked)
        if updated is None:
            raise TicketNotFoundError(f"Ticket not found for ID: {ticket_id}")
        logger.info("Checked ticket %s", ticket_id)
        return updated
