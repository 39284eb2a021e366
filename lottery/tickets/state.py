from __future__ import annotations

from enum import Enum

from .errors import NotModifiableError


class TicketStatus(str, Enum):
    """Supported states for a ticket's lifecycle."""

    OPEN = "open"
    CHECKED = "checked"


class TicketStateMachine:
    """Validate ticket lifecycle transitions."""

    _TRANSITIONS: dict[TicketStatus, set[TicketStatus]] = {
        TicketStatus.OPEN: {TicketStatus.CHECKED},
        TicketStatus.CHECKED: set(),
    }

    @classmethod
    def can_transition(cls, current: TicketStatus, new: TicketStatus) -> bool:
        if current == new:
            return True
        return new in cls._TRANSITIONS.get(current, set())

    @classmethod
    def assert_transition(cls, current: TicketStatus, new: TicketStatus) -> None:
        if not cls.can_transition(current, new):
            raise NotModifiableError(f"Invalid ticket status transition: {current.value} -> {new.value}")

    @classmethod
    def accepts_lines(cls, status: TicketStatus) -> bool:
        return status == TicketStatus.OPEN
