from __future__ import annotations

import logging
import random
from threading import RLock
from typing import Callable, Iterable

from .errors import TicketNotCreatedError
from .models import Line, Ticket

logger = logging.getLogger(__name__)

DEFAULT_ID_MIN = 1000
DEFAULT_ID_MAX = 9999


class TicketRepository:
    """In-memory store owning every live ticket.

    All access goes through the methods below and a single re-entrant lock.
    Stored tickets are immutable snapshots, so callers can keep whatever
    they receive without seeing later changes.
    """

    _MAX_RANDOM_ATTEMPTS = 32

    def __init__(
        self,
        *,
        id_min: int = DEFAULT_ID_MIN,
        id_max: int = DEFAULT_ID_MAX,
        rng: random.Random | None = None,
    ) -> None:
        if id_min > id_max:
            raise ValueError(f"Empty ticket id space: [{id_min}, {id_max}]")
        self._id_min = id_min
        self._id_max = id_max
        self._rng = rng or random.Random()
        self._tickets: dict[int, Ticket] = {}
        self._lock = RLock()

    @property
    def capacity(self) -> int:
        return self._id_max - self._id_min + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def create_ticket(self, lines: Iterable[Line] = ()) -> Ticket:
        lines = tuple(lines)
        with self._lock:
            ticket = Ticket(id=self._allocate_id(), lines=lines)
            self._tickets[ticket.id] = ticket
            live = len(self._tickets)
        logger.debug("Stored ticket %s (%d live)", ticket.id, live)
        return ticket

    def put_ticket(self, ticket: Ticket) -> Ticket:
        with self._lock:
            self._tickets[ticket.id] = ticket
        return ticket

    def get_ticket(self, ticket_id: int) -> Ticket | None:
        with self._lock:
            return self._tickets.get(ticket_id)

    def list_tickets(self) -> list[Ticket]:
        with self._lock:
            return list(self._tickets.values())

    def exists(self, ticket_id: int) -> bool:
        with self._lock:
            return ticket_id in self._tickets

    def update_ticket(self, ticket_id: int, change: Callable[[Ticket], Ticket]) -> Ticket | None:
        """Replace a ticket with ``change(current)`` as one atomic step.

        Returns ``None`` when the ticket does not exist. Exceptions raised by
        ``change`` propagate and leave the stored ticket as it was.
        """

        with self._lock:
            current = self._tickets.get(ticket_id)
            if current is None:
                return None
            updated = change(current)
            if updated.id != current.id:
                raise ValueError(f"Ticket id changed during update: {current.id} -> {updated.id}")
            self._tickets[ticket_id] = updated
            return updated

    def _allocate_id(self) -> int:
        # caller holds the lock
        if len(self._tickets) >= self.capacity:
            raise TicketNotCreatedError(
                f"Ticket id space [{self._id_min}, {self._id_max}] is exhausted"
            )
        for _ in range(self._MAX_RANDOM_ATTEMPTS):
            candidate = self._rng.randint(self._id_min, self._id_max)
            if candidate not in self._tickets:
                return candidate
        free = [value for value in range(self._id_min, self._id_max + 1) if value not in self._tickets]
        logger.warning("Ticket id space is crowded, %d identifiers left", len(free))
        return self._rng.choice(free)
