"""Base class for enumerations of game actions."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import TypeVar

_A = TypeVar("_A", bound="Actionlike")


class Actionlike(Enum):
    """An enumeration of actions, each with a stable position.

    Subclass it like any :class:`enum.Enum`; the position of a member is
    the order in which it was defined.
    """

    @classmethod
    def n_variants(cls) -> int:
        """The number of actions in this enumeration."""
        return len(cls)

    @classmethod
    def get_at(cls: type[_A], index: int) -> _A | None:
        """The action at ``index``, or ``None`` if there is none."""
        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return None

    def index(self) -> int:
        """The position of this action within its enumeration."""
        for position, member in enumerate(type(self)):
            if member is self:
                return position
        raise ValueError(f"{self!r} is not a member of {type(self).__name__}")

    @classmethod
    def variants(cls: type[_A]) -> Iterator[_A]:
        """Iterate over every action, in definition order."""
        return iter(cls)