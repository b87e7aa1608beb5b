"""Small record types: a customer and a person's name with an optional middle part."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Customer:
    """A customer with first name, last name and a value; unpacks into its three fields."""

    first: str
    last: str
    value: int

    def __iter__(self) -> Iterator[object]:
        yield self.first
        yield self.last
        yield self.value


@dataclass(frozen=True)
class Name:
    """A person's name; the middle name may be missing."""

    first: str
    middle: str | None
    last: str

    def __str__(self) -> str:
        if self.middle is not None:
            return f"{self.first} {self.middle} {self.last}"
        return f"{self.first} {self.last}"