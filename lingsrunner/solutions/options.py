"""Reference solution of the options exercise."""

from __future__ import annotations

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None past hour 24."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit integer")
    if time_of_day <= 21:
        return 5
    if time_of_day <= 24:
        return 0
    return None