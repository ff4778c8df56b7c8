"""A doubly linked list of records."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    item: T
    next: _Node[T] | None = None
    prev: _Node[T] | None = None


class DoublyLinkedList(Generic[T]):
    """Doubly linked list that appends at the tail."""

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None

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
            node.prev = self._tail
            self._tail.next = node
            self._tail = node

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = self._tail = None

    def remove(self, content: str) -> None:
        """Remove the first item whose ``content`` equals ``content``."""
        for node in self._nodes():
            if node.item.content == content:  # type: ignore[attr-defined]
                if node.prev is None:
                    self._head = node.next
                else:
                    node.prev.next = node.next
                if node.next is None:
                    self._tail = node.prev
                else:
                    node.next.prev = node.prev
                return

    def contents_for(self, email: str) -> list[str]:
        """Return the contents of all items written by ``email``."""
        return [item.content for item in self if item.email == email]  # type: ignore[attr-defined]

    def find(self, content: str) -> T | None:
        """Return the first item with the given content, or None."""
        return next(
            (item for item in self if item.content == content),  # type: ignore[attr-defined]
            None,
        )

    def listing(self) -> str:
        """Return a numbered listing of the items, without their first field."""
        lines = [
            f"{number}. " + " || ".join(item.parts()[1:])  # type: ignore[attr-defined]
            for number, item in enumerate(self, start=1)
        ]
        lines.append("Fin de las publicaciones!")
        return "\n".join(lines) + "\n"

    def to_dot(self) -> str:
        """Return a Graphviz description of the list with links both ways."""
        lines = ["digraph G {", "node [shape=record];", "rankdir=LR;"]
        for index, node in enumerate(self._nodes()):
            lines.append(f'node{index} [label="{{{node.item}}}"];')
            if node.next is not None:
                lines.append(f"node{index} -> node{index + 1};")
                lines.append(f"node{index + 1} -> node{index};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def write_dot(self, filename: str) -> None:
        """Write the Graphviz description to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.to_dot())

    def render_graphviz(self, dot_filename: str, image_filename: str) -> str:
        """Render ``dot_filename`` to a PNG with the ``dot`` tool."""
        subprocess.run(
            ["dot", "-Tpng", dot_filename, "-o", image_filename], check=False
        )
        return image_filename

    def emails(self) -> list[str]:
        """Return the first field of every item."""
        return [item.parts()[0] for item in self]  # type: ignore[attr-defined]

    def preorder(self) -> list[T]:
        """Visit each node, then its successor."""
        return list(self)

    def inorder(self) -> list[T]:
        """Visit predecessor, node, successor; on a list this is head to tail."""
        return list(self)

    def postorder(self) -> list[T]:
        """Visit successors before each node; on a list this is tail to head."""
        return [node.item for node in reversed(list(self._nodes()))]

    def posts(self) -> list[T]:
        """Return every item from head to tail."""
        return list(self)

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"DoublyLinkedList({items!r})"