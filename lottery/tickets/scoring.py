"""Scoring rules for a single lottery line."""

from __future__ import annotations

from .errors import InvalidInputError

MIN_NUMBER = 0
MAX_NUMBER = 2


def _ensure_number(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Line numbers must be integers, got {value!r}")
    if not MIN_NUMBER <= value <= MAX_NUMBER:
        raise InvalidInputError(f"Line numbers must be between {MIN_NUMBER} and {MAX_NUMBER}, got {value}")
    return value


def score_line(a: int, b: int, c: int) -> int:
    """Return the score of the line ``(a, b, c)``.

    Rules are evaluated in order and the first match wins:

    * the numbers sum to 2: 10 points
    * all three numbers are equal: 5 points
    * the first number differs from both others: 1 point
    * anything else: 0 points
    """

    a, b, c = (_ensure_number(value) for value in (a, b, c))
    if a + b + c == 2:
        return 10
    if a == b == c:
        return 5
    if a != b and a != c:
        return 1
    return 0
