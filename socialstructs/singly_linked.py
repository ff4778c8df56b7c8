"""A singly linked list of records, optionally labelled with an index."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    item: T
    next: _Node[T] | None = None


class SinglyLinkedList(Generic[T]):
    """Singly linked list that appends at the tail."""

    def __init__(self, index: str = "") -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self.index = index

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.item for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def insert(self, item: T) -> None:
        """Append ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def is_empty(self) -> bool:
        return self._head is None

    def contents(self) -> list[str]:
        """Return the ``content`` of every item from head to tail."""
        return [item.content for item in self]  # type: ignore[attr-defined]

    def _remove_first(self, matches: Callable[[T], bool]) -> None:
        previous: _Node[T] | None = None
        for node in self._nodes():
            if matches(node.item):
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                return
            previous = node

    def remove_by_date(self, date: str) -> None:
        """Remove the first item whose ``date`` equals ``date``."""
        self._remove_first(lambda item: item.date == date)  # type: ignore[attr-defined]

    def remove_by_email(self, email: str) -> None:
        """Remove the first item whose ``email`` equals ``email``."""
        self._remove_first(lambda item: item.email == email)  # type: ignore[attr-defined]

    def contains_email(self, email: str) -> bool:
        """Tell whether some item has the given ``email``."""
        return any(item.email == email for item in self)  # type: ignore[attr-defined]

    def contains_date(self, date: str) -> bool:
        """Tell whether some item has the given ``date``."""
        return any(item.date == date for item in self)  # type: ignore[attr-defined]

    def to_dot(self) -> str:
        """Return a Graphviz description of the list with forward links."""
        lines = ["digraph G {", "node [shape=record];", "rankdir=LR;"]
        for index, node in enumerate(self._nodes()):
            lines.append(f'node{index} [label="{{{node.item}}}"];')
            if node.next is not None:
                lines.append(f"node{index} -> node{index + 1};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def write_dot(self, filename: str) -> None:
        """Write the Graphviz description to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.to_dot())

    def render_graphviz(self, dot_filename: str, image_filename: str) -> None:
        """Render ``dot_filename`` to a PNG with the ``dot`` tool."""
        subprocess.run(
            ["dot", "-Tpng", dot_filename, "-o", image_filename], check=False
        )

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"SinglyLinkedList({self.index!r}, {items!r})"