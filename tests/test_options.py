import pytest

from lingsrunner.solutions.options import maybe_icecream


@pytest.mark.parametrize(
    ("hour", "expected"),
    [(9, 5), (10, 5), (23, 0), (22, 0), (25, None), (0, 5), (24, 0)],
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_negative_hour_rejected():
    with pytest.raises(ValueError):
        maybe_icecream(-1)