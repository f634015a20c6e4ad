"""Reference solutions for the enum, struct, generic, trait, module, macro,
ownership and thread drills."""

from __future__ import annotations

import enum
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import singledispatch
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Message:
    """A command for a MachineState; build one with the class constructors."""

    class Kind(enum.Enum):
        MOVE = "move"
        ECHO = "echo"
        CHANGE_COLOR = "change_color"
        QUIT = "quit"

    kind: Message.Kind
    payload: Any = None

    @classmethod
    def move(cls, point: Point) -> Message:
        return cls(cls.Kind.MOVE, point)

    @classmethod
    def echo(cls, text: str) -> Message:
        return cls(cls.Kind.ECHO, text)

    @classmethod
    def change_color(cls, color: tuple[int, int, int]) -> Message:
        return cls(cls.Kind.CHANGE_COLOR, tuple(color))

    @classmethod
    def quit(cls) -> Message:
        return cls(cls.Kind.QUIT)


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message.kind:
            case Message.Kind.MOVE:
                self.position = message.payload
            case Message.Kind.ECHO:
                print(message.payload)
            case Message.Kind.CHANGE_COLOR:
                self.color = message.payload
            case Message.Kind.QUIT:
                self.quit = True


@dataclass(frozen=True)
class ColorClassic:
    """A named colour with its hex code."""

    name: str
    hex: str


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
    """The order that new orders are derived from."""
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
    """A parcel sent between two countries; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError(f"package weight must be positive, got {self.weight_in_grams}")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's grade, numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )


@singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; ``None`` stands for the empty list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(0, None)


_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}


def favourite_snacks() -> tuple[str, str]:
    """The favourite fruit and vegetable, printed and returned."""
    fruit, veggie = _FRUITS["PEAR"], _VEGGIES["CUCUMBER"]
    print(f"favorite snacks: {fruit} and {veggie}")
    return fruit, veggie


def my_macro(val: Any) -> str:
    """Greet ``val``."""
    return f"Hello {val}"


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """A new list holding ``vec`` followed by 22, 44 and 66."""
    return [*(vec or ()), 22, 44, 66]


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs on a worker thread while polling progress.

    Prints a waiting line on each poll and returns how many polls were made.
    """
    lock = threading.Lock()
    completed = 0

    def worker() -> None:
        nonlocal completed
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits = 0
    while True:
        with lock:
            if completed >= jobs:
                break
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    thread.join()
    return waits