"""Reference solutions of the introductory exercises."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for i, value in enumerate(values):
        values[i] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 byte length; ``y`` on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y