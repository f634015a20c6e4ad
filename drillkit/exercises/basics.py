"""Reference solutions for the variables, functions, if, strings and quiz drills."""

from __future__ import annotations


def calculate_apple_price(num: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    return num if num > 40 else num * 2


def times_two(num: int) -> int:
    return num * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def call_me(num: int) -> None:
    """Print one ring line per call."""
    for i in range(1, num + 1):
        print(f"Ring! Call number {i}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def describe_ten(x: int) -> str:
    return "Ten!" if x == 10 else "Not ten!"