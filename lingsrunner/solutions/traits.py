"""Reference solutions of the trait exercises."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return f"{value}Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()