"""Links from one entity to the action states of other entities."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from inputactions.actionlike import Actionlike


class _TargetKind(Enum):
    NONE = "none"
    SINGLE = "single"
    MULTI = "multi"


class ActionStateDriverTarget:
    """The set of entities whose action state a driver updates.

    A target holds no entity, a single entity, or several. Entities are
    any hashable identifiers.
    """

    __slots__ = ("_kind", "_entities")

    def __init__(self, entities: Iterable[Hashable] = ()) -> None:
        unique = set(entities)
        if not unique:
            self._kind = _TargetKind.NONE
        elif len(unique) == 1:
            self._kind = _TargetKind.SINGLE
        else:
            self._kind = _TargetKind.MULTI
        self._entities: set[Hashable] = unique

    @classmethod
    def from_entities(cls, entities: Iterable[Hashable]) -> ActionStateDriverTarget:
        """A target holding each distinct entity of ``entities``."""
        return cls(entities)

    @classmethod
    def _of(cls, kind: _TargetKind, entities: set[Hashable]) -> ActionStateDriverTarget:
        target = cls()
        target._kind = kind
        target._entities = entities
        return target

    def __iter__(self) -> Iterator[Hashable]:
        return iter(set(self._entities))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionStateDriverTarget):
            return NotImplemented
        return self._kind is other._kind and self._entities == other._entities

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._kind is _TargetKind.NONE:
            return "ActionStateDriverTarget()"
        return f"ActionStateDriverTarget({sorted(self._entities, key=repr)!r})"

    def with_entity(self, entity: Hashable) -> ActionStateDriverTarget:
        """A new target that also holds ``entity``."""
        if self._kind is _TargetKind.NONE:
            return self._of(_TargetKind.SINGLE, {entity})
        return self._of(_TargetKind.MULTI, self._entities | {entity})

    def without(self, entity: Hashable) -> ActionStateDriverTarget:
        """A new target with ``entity`` removed.

        A target holding a single entity becomes empty, whichever entity
        is named.
        """
        if self._kind is not _TargetKind.MULTI:
            return self._of(_TargetKind.NONE, set())
        return type(self)(self._entities - {entity})

    def _become(self, other: ActionStateDriverTarget) -> None:
        self._kind = other._kind
        self._entities = other._entities

    def insert(self, entity: Hashable) -> None:
        """Add ``entity`` as a target."""
        self._become(self.with_entity(entity))

    def remove(self, entity: Hashable) -> None:
        """Remove ``entity`` as a target; see :meth:`without`."""
        self._become(self.without(entity))

    def add(self, entities: Iterable[Hashable]) -> None:
        """Add every entity of ``entities`` as a target."""
        for entity in entities:
            self.insert(entity)

    def is_empty(self) -> bool:
        """Are there no targets?"""
        return not self._entities


def _as_target(targets: object) -> ActionStateDriverTarget:
    if isinstance(targets, ActionStateDriverTarget):
        return targets
    if targets is None:
        return ActionStateDriverTarget()
    return ActionStateDriverTarget([targets])


@dataclass
class ActionStateDriver:
    """Lets the entity that carries it drive ``action`` on the target entities.

    ``targets`` may be given as a single entity or ``None`` for convenience;
    it is stored as an :class:`ActionStateDriverTarget`.
    """

    action: Actionlike
    targets: ActionStateDriverTarget = field(default_factory=ActionStateDriverTarget)

    def __post_init__(self) -> None:
        self.targets = _as_target(self.targets)