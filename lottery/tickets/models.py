from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .errors import NotModifiableError
from .scoring import score_line
from .state import TicketStateMachine, TicketStatus


@dataclass(frozen=True, slots=True)
class Line:
    """Three numbers drawn for a ticket together with their score."""

    numbers: tuple[int, int, int]
    score: int = field(init=False)

    def __post_init__(self) -> None:
        numbers = tuple(self.numbers)
        if len(numbers) != 3:
            raise ValueError(f"A line holds exactly three numbers, got {len(numbers)}")
        object.__setattr__(self, "numbers", numbers)
        object.__setattr__(self, "score", score_line(*numbers))

    @classmethod
    def from_numbers(cls, a: int, b: int, c: int) -> "Line":
        return cls(numbers=(a, b, c))


@dataclass(frozen=True, slots=True)
class Ticket:
    """Immutable snapshot of a ticket.

    Changes never happen in place: ``with_lines`` and ``mark_checked``
    return a new snapshot which the repository swaps in under its lock.
    """

    id: int
    lines: tuple[Line, ...] = ()
    checked: bool = False

    @property
    def status(self) -> TicketStatus:
        return TicketStatus.CHECKED if self.checked else TicketStatus.OPEN

    def with_lines(self, new_lines: Iterable[Line]) -> "Ticket":
        if not TicketStateMachine.accepts_lines(self.status):
            raise NotModifiableError(
                f"Ticket ID {self.id} cannot be modified as it has already been checked."
            )
        return replace(self, lines=self.lines + tuple(new_lines))

    def mark_checked(self) -> "Ticket":
        TicketStateMachine.assert_transition(self.status, TicketStatus.CHECKED)
        # sorted() is stable with reverse=True, equal scores keep append order
        ordered = tuple(sorted(self.lines, key=lambda line: line.score, reverse=True))
        return replace(self, lines=ordered, checked=True)
