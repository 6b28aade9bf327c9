"""Reference solutions of the box, cow and generics exercises."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    next: Union["Cons", Nil]


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every element non-negative, copying only when needed.

    An unchanged input is returned as is; a mutable sequence is changed in
    place; an immutable one that needs changes is copied into a new list.
    """
    if all(v >= 0 for v in values):
        return values
    if isinstance(values, MutableSequence):
        for i, v in enumerate(values):
            if v < 0:
                values[i] = -v
        return values
    return [-v if v < 0 else v for v in values]