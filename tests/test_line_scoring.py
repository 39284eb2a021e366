import itertools

import pytest

from lottery.tickets.errors import InvalidInputError
from lottery.tickets.models import Line
from lottery.tickets.scoring import score_line


@pytest.mark.parametrize(
    ("numbers", "expected"),
    [
        ((0, 1, 1), 10),
        ((1, 1, 0), 10),
        ((2, 0, 0), 10),
        ((1, 1, 1), 5),
        ((0, 0, 0), 5),
        ((2, 2, 2), 5),
        ((0, 1, 2), 1),
        ((2, 1, 1), 1),
        ((0, 1, 0), 0),
        ((2, 2, 1), 0),
    ],
)
def test_score_line_rules(numbers, expected):
    assert score_line(*numbers) == expected


def test_score_line_is_total_and_deterministic():
    for numbers in itertools.product(range(3), repeat=3):
        first = score_line(*numbers)
        assert first in {0, 1, 5, 10}
        assert score_line(*numbers) == first


def test_sum_of_two_takes_precedence_over_first_number_rule():
    # 0 differs from both 1 and 1, but the sum rule wins
    assert score_line(0, 1, 1) == 10
    assert score_line(1, 0, 1) == 10


@pytest.mark.parametrize("numbers", [(3, 0, 0), (0, -1, 0), (0, 0, 5)])
def test_score_line_rejects_out_of_range(numbers):
    with pytest.raises(InvalidInputError):
        score_line(*numbers)


def test_score_line_rejects_non_integers():
    with pytest.raises(InvalidInputError):
        score_line(1.0, 0, 0)
    with pytest.raises(InvalidInputError):
        score_line(True, 0, 0)


def test_line_computes_score_once():
    line = Line.from_numbers(0, 1, 2)
    assert line.numbers == (0, 1, 2)
    assert line.score == 1
    with pytest.raises(AttributeError):
        line.score = 10  # type: ignore[misc]


def test_line_requires_three_numbers():
    with pytest.raises(ValueError):
        Line(numbers=(0, 1))  # type: ignore[arg-type]
