import logging
import random
from collections.abc import Iterable

import pytest

from lottery.tickets.generator import LineGenerator
from lottery.tickets.models import Line
from lottery.tickets.repository import TicketRepository
from lottery.tickets.service import TicketService


class ScriptedLineGenerator(LineGenerator):
    """Hands out predetermined lines, then falls back to seeded draws."""

    def __init__(self, triples: Iterable[tuple[int, int, int]] = ()):
        super().__init__(random.Random(7))
        self._queue = [Line(numbers=triple) for triple in triples]

    def generate(self, count: int) -> list[Line]:
        taken, self._queue = self._queue[:count], self._queue[count:]
        return taken + super().generate(count - len(taken))


@pytest.fixture
def repository() -> TicketRepository:
    return TicketRepository(rng=random.Random(1234))


@pytest.fixture
def service(repository: TicketRepository) -> TicketService:
    return TicketService(repository, generator=LineGenerator(random.Random(42)))


@pytest.fixture
def make_service(repository: TicketRepository):
    """Build a service whose first lines are the given number triples."""

    def factory(triples: Iterable[tuple[int, int, int]] = ()) -> TicketService:
        return TicketService(repository, generator=ScriptedLineGenerator(triples))

    return factory


@pytest.fixture
def restore_root_logger():
    """Undo any handler or level changes made to the root logger."""

    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
