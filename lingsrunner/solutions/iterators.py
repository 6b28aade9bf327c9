"""Reference solutions of the iterator exercises."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text``; ``"hello"`` becomes ``"Hello"``."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize every word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize every word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` if it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide every number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each quotient or its error."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """Factorial of an unsigned 64-bit number; raise OverflowError if it does not fit."""
    if num < 0:
        raise ValueError(f"{num} is not an unsigned integer")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)