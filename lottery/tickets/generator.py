from __future__ import annotations

import random

from .errors import InvalidInputError
from .models import Line
from .scoring import MAX_NUMBER, MIN_NUMBER


class LineGenerator:
    """Draw lines of uniformly distributed numbers."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, count: int) -> list[Line]:
        if count < 0:
            raise InvalidInputError(f"Cannot generate a negative number of lines: {count}")
        return [self._draw() for _ in range(count)]

    def _draw(self) -> Line:
        return Line.from_numbers(
            self._rng.randint(MIN_NUMBER, MAX_NUMBER),
            self._rng.randint(MIN_NUMBER, MAX_NUMBER),
            self._rng.randint(MIN_NUMBER, MAX_NUMBER),
        )
