import pytest

from lottery.tickets.errors import NotModifiableError
from lottery.tickets.models import Line, Ticket
from lottery.tickets.state import TicketStatus


def _lines(*triples):
    return tuple(Line(numbers=triple) for triple in triples)


def test_new_ticket_is_open_and_empty():
    ticket = Ticket(id=1000)
    assert ticket.lines == ()
    assert ticket.checked is False
    assert ticket.status == TicketStatus.OPEN


def test_with_lines_appends_after_existing_lines():
    ticket = Ticket(id=1000, lines=_lines((0, 1, 1), (2, 2, 1)))
    updated = ticket.with_lines(_lines((1, 1, 1)))

    assert [line.numbers for line in updated.lines] == [(0, 1, 1), (2, 2, 1), (1, 1, 1)]
    assert len(ticket.lines) == 2


def test_with_lines_rejects_checked_ticket():
    ticket = Ticket(id=1000, lines=_lines((0, 1, 1)), checked=True)
    with pytest.raises(NotModifiableError):
        ticket.with_lines(_lines((1, 1, 1)))


def test_mark_checked_sorts_by_score_descending():
    ticket = Ticket(id=1000, lines=_lines((0, 1, 0), (0, 1, 2), (1, 1, 1), (0, 1, 1)))
    checked = ticket.mark_checked()

    assert checked.checked is True
    assert checked.status == TicketStatus.CHECKED
    assert [line.score for line in checked.lines] == [10, 5, 1, 0]
    assert ticket.checked is False


def test_mark_checked_keeps_append_order_for_equal_scores():
    ticket = Ticket(id=1000, lines=_lines((2, 1, 2), (0, 1, 1), (2, 2, 1), (2, 0, 0), (1, 2, 2)))
    checked = ticket.mark_checked()

    assert [line.numbers for line in checked.lines] == [
        (0, 1, 1),
        (2, 0, 0),
        (1, 2, 2),
        (2, 1, 2),
        (2, 2, 1),
    ]


def test_mark_checked_is_idempotent():
    ticket = Ticket(id=1000, lines=_lines((0, 1, 0), (0, 1, 1))).mark_checked()
    again = ticket.mark_checked()
    assert again == ticket
