"""Record types for users, posts, comments, friend requests and relations."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any


@total_ordering
class _Keyed:
    """Equality, ordering and hashing by a single key field.

    A record also compares with a bare string, which is taken as a key value.
    """

    def _key(self) -> str:
        raise NotImplementedError

    def _other_key(self, other: Any) -> str | None:
        if isinstance(other, str):
            return other
        if isinstance(other, type(self)):
            return other._key()
        return None

    def __eq__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() == key

    def __lt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(eq=False)
class User(_Keyed):
    """A registered user, identified and ordered by e-mail."""

    name: str
    surname: str
    birth_date: str
    email: str
    password: str

    def _key(self) -> str:
        return self.email

    def __str__(self) -> str:
        return f"{self.name} {self.surname} {self.birth_date} {self.email} {self.password} "

    def parts(self) -> list[str]:
        """Return the fields in declaration order."""
        return [self.name, self.surname, self.birth_date, self.email, self.password]

    def to_csv(self) -> str:
        """Return the fields joined by commas."""
        return ",".join(self.parts())


@dataclass(eq=False)
class Comment(_Keyed):
    """A comment on a post, ordered by its timestamp."""

    email: str = ""
    content: str = ""
    timestamp: str = ""

    def _key(self) -> str:
        return self.timestamp

    def __str__(self) -> str:
        return f"{self.email} {self.content} {self.timestamp} "

    def describe(self) -> str:
        """Return a labelled, human-readable description."""
        return (
            f"Correo: {self.email}, Contenido: {self.content}, "
            f"Fecha y Hora: {self.timestamp}"
        )


@dataclass(eq=False)
class Post(_Keyed):
    """A post by a user, ordered by its date; holds its comments."""

    email: str
    content: str
    date: str
    time: str
    comments: list[Comment] = field(default_factory=list)

    def _key(self) -> str:
        return self.date

    def __str__(self) -> str:
        return f"{self.email} {self.content} {self.date} {self.time} "


@dataclass
class Request:
    """A friend request sent by ``sender`` to the user with ``email``."""

    sender: str
    email: str
    date: str
    time: str

    def __str__(self) -> str:
        return f"{self.sender} {self.email} {self.date} {self.time} "

    def parts(self) -> list[str]:
        """Return the fields in declaration order."""
        return [self.sender, self.email, self.date, self.time]


@dataclass
class Relation:
    """A relation between two users with its status."""

    sender: str
    receiver: str
    status: str

    def __str__(self) -> str:
        return f"{self.sender} {self.receiver} {self.status} "

    def parts(self) -> list[str]:
        """Return the fields in declaration order."""
        return [self.sender, self.receiver, self.status]