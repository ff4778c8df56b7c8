"""A stack of records, such as received friend requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when the top of an empty stack is requested."""


@dataclass(eq=False)
class _Node(Generic[T]):
    item: T
    next: _Node[T] | None = None


def _line(number: int, item: object) -> str:
    return f"{number}. " + " || ".join(item.parts()[1:])  # type: ignore[attr-defined]


class Stack(Generic[T]):
    """Last-in, first-out stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def push(self, item: T) -> None:
        self._top = _Node(item, self._top)

    def pop(self) -> None:
        """Discard the top item; does nothing on an empty stack."""
        if self._top is not None:
            self._top = self._top.next

    def top(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise EmptyStackError("La pila está vacía")
        return self._top.item

    def is_empty(self) -> bool:
        return self._top is None

    def contains(self, email: str) -> bool:
        """Tell whether some item has the given ``email``."""
        return any(item.email == email for item in self)  # type: ignore[attr-defined]

    def remove(self, email: str) -> None:
        """Remove the topmost item with the given ``email``, if any."""
        previous: _Node[T] | None = None
        node = self._top
        while node is not None:
            if node.item.email == email:  # type: ignore[attr-defined]
                if previous is None:
                    self._top = node.next
                else:
                    previous.next = node.next
                return
            previous, node = node, node.next

    def render_top(self) -> str:
        """Return the top item as a numbered line, without its first field."""
        if self._top is None:
            return "La pila está vacía\n"
        return _line(1, self._top.item) + "\n"

    def render(self) -> str:
        """Return every item as numbered lines, top first."""
        return "".join(
            _line(number, item) + "\n" for number, item in enumerate(self, start=1)
        )