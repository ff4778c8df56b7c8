"""A small association map in which later insertions shadow earlier ones."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class SimpleMap(Generic[K, V]):
    """Association list; lookups return the most recently inserted value."""

    def __init__(self) -> None:
        self._entries: list[tuple[K, V]] = []

    def insert(self, key: K, value: V) -> None:
        """Add an entry; it shadows any earlier entry with the same key."""
        self._entries.append((key, value))

    def _lookup(self, key: K) -> tuple[K, V] | None:
        return next(
            (entry for entry in reversed(self._entries) if entry[0] == key), None
        )

    def get(self, key: K) -> V | None:
        """Return the latest value for ``key``, or None if it is absent."""
        entry = self._lookup(key)
        return None if entry is None else entry[1]

    def __contains__(self, key: object) -> bool:
        return self._lookup(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        """Yield keys, newest entry first; shadowed keys appear again."""
        return (key for key, _ in reversed(self._entries))