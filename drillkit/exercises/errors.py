"""Reference solutions for the error handling, option and division drills."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; empty names are rejected."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot become a PositiveNonzeroInteger."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError("Number is negative")
        if self.value == 0:
            raise CreationError("Number is zero")


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a PositiveNonzeroInteger."""
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))


class DivisionError(ArithmeticError):
    """A division that does not give a whole number."""


class NotDivisibleError(DivisionError):
    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a / b when b divides a evenly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def _attempt(n: int) -> int | DivisionError:
    try:
        return divide(n, _DIVISOR)
    except DivisionError as exc:
        return exc


def result_with_list() -> list[int]:
    """Quotients of the sample numbers, leaving out those that fail."""
    return [value for value in map(_attempt, _NUMBERS) if not isinstance(value, DivisionError)]


def list_of_results() -> list[int | DivisionError]:
    """Quotient or error for each of the sample numbers."""
    return [_attempt(n) for n in _NUMBERS]


def option_numbers() -> list[int]:
    """The five computed numbers of the option drill."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def drain_optionals(values: list[int | None]) -> list[int]:
    """Pop from the end, printing values, until a missing one or the start."""
    drained = []
    for value in reversed(values):
        if value is None:
            break
        print(f"current value: {value}")
        drained.append(value)
    return drained