"""Reference solutions of the struct exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassic:
    """An RGB colour with named fields."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """An RGB colour addressed by position."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLike:
    """A value without fields."""

    def __repr__(self) -> str:
        return "UnitLike"


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram