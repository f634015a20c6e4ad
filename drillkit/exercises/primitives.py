"""Reference solutions for the primitive types and lint drills."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that apply, in order."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(c: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c.isalpha():
        return "Alphabetical!"
    if c.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(a: Sequence[Any]) -> str:
    if len(a) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(a: Sequence[Any]) -> Sequence[Any]:
    """The second to fourth elements."""
    return a[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers: Sequence[Any]) -> Any:
    return numbers[1]


def floats_differ(x: float, y: float) -> bool:
    """Compare floats with a tolerance instead of exact equality."""
    return abs(y - x) > 0.0001


def add_optional(res: int, option: int | None) -> int:
    """Add ``option`` to ``res`` when it is present."""
    if option is not None:
        res += option
    return res