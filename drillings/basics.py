"""Small worked exercises: prices, conditions, strings and options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}
_FIZZ_WORDS = {"fizz": "foo", "fuzz": "bar"}


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar", and anything else to "baz"."""
    return _FIZZ_WORDS.get(fizzish, "baz")


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour of the day: 5 before 22:00, 0 after, None if invalid."""
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T