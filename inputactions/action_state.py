"""Per-action button state, values and timing for an enumeration of actions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from inputactions.actionlike import Actionlike
from inputactions.buttonlike import ButtonState
from inputactions.dual_axis_data import DualAxisData

A = TypeVar("A", bound=Actionlike)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Timing:
    """When an action was pressed or released, and for how long.

    Instants and durations are in seconds, measured on any monotonic clock.
    Timings are ordered by ``current_duration`` alone.
    """

    instant_started: float | None = None
    current_duration: float = 0.0
    previous_duration: float = 0.0

    def tick(self, current_instant: float, previous_instant: float) -> None:
        """Advance ``current_duration`` to ``current_instant``.

        If no start instant has been recorded yet, ``previous_instant``
        becomes the start, keeping timings aligned with frame starts.
        """
        if self.instant_started is not None:
            self.current_duration = current_instant - self.instant_started
        else:
            self.current_duration = current_instant - previous_instant
            self.instant_started = previous_instant

    def flip(self) -> None:
        """Move the current duration into the previous one and restart the clock."""
        self.previous_duration = self.current_duration
        self.current_duration = 0.0
        self.instant_started = None

    def __lt__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration < other.current_duration

    def __le__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration <= other.current_duration

    def __gt__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration > other.current_duration

    def __ge__(self, other: Timing) -> bool:
        if not isinstance(other, Timing):
            return NotImplemented
        return self.current_duration >= other.current_duration


@dataclass
class ActionData:
    """Everything known about one action.

    ``value`` may exceed the usual bounds when several inputs trigger the
    action at once. A consumed action cannot be pressed again until it
    has been released.
    """

    state: ButtonState = ButtonState.RELEASED
    value: float = 0.0
    axis_pair: DualAxisData | None = None
    timing: Timing = field(default_factory=Timing)
    consumed: bool = False


class ActionState(Generic[A]):
    """The input-method-agnostic state of every action in an enumeration."""

    def __init__(self, action_type: type[A]) -> None:
        self.action_type = action_type
        self._data: list[ActionData] = [ActionData() for _ in action_type.variants()]

    def __repr__(self) -> str:
        return f"ActionState({self.action_type.__name__}, {self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionState):
            return NotImplemented
        return self.action_type is other.action_type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _position(self, action: A) -> int:
        if not isinstance(action, self.action_type):
            raise TypeError(
                f"{action!r} is not an action of {self.action_type.__name__}"
            )
        return action.index()

    def update(self, action_data: Iterable[ActionData]) -> None:
        """Press or release every action, and copy values, from data in action order."""
        incoming = list(action_data)
        expected = self.action_type.n_variants()
        if len(incoming) != expected:
            raise ValueError(
                f"expected data for {expected} actions, got {len(incoming)}"
            )
        for action, data in zip(self.action_type.variants(), incoming):
            if data.state.pressed():
                self.press(action)
            else:
                self.release(action)
            own = self._data[action.index()]
            own.axis_pair = data.axis_pair
            own.value = data.value

    def tick(self, current_instant: float, previous_instant: float) -> None:
        """Advance button states and, for unconsumed actions, their timings."""
        for data in self._data:
            data.state = data.state.tick()
        for data in self._data:
            if not data.consumed:
                data.timing.tick(current_instant, previous_instant)

    def action_data(self, action: A) -> ActionData:
        """The live data of ``action``; changes to it change this state."""
        return self._data[self._position(action)]

    def set_action_data(self, action: A, data: ActionData) -> None:
        """Replace the data of ``action`` wholesale."""
        self._data[self._position(action)] = data

    def value(self, action: A) -> float:
        """The value of the input that triggered ``action``; may be unbounded."""
        return self.action_data(action).value

    def clamped_value(self, action: A) -> float:
        """The value of ``action`` clamped to ``[-1.0, 1.0]``."""
        return _clamp(self.value(action), -1.0, 1.0)

    def axis_pair(self, action: A) -> DualAxisData | None:
        """The dual-axis data of ``action``, if its input provides one."""
        return self.action_data(action).axis_pair

    def clamped_axis_pair(self, action: A) -> DualAxisData | None:
        """The dual-axis data of ``action`` with each axis clamped to ``[-1.0, 1.0]``."""
        pair = self.axis_pair(action)
        if pair is None:
            return None
        return DualAxisData(_clamp(pair.x, -1.0, 1.0), _clamp(pair.y, -1.0, 1.0))

    def press(self, action: A) -> None:
        """Press ``action`` unless it is consumed."""
        data = self.action_data(action)
        if data.consumed:
            return
        if data.state.released():
            data.timing.flip()
        data.state = data.state.press()

    def release(self, action: A) -> None:
        """Release ``action``, lifting any consumption."""
        data = self.action_data(action)
        data.consumed = False
        if data.state.pressed():
            data.timing.flip()
        data.state = data.state.release()

    def consume(self, action: A) -> None:
        """Release ``action`` and block it from being pressed until released again."""
        data = self.action_data(action)
        data.consumed = True
        data.state = data.state.release()
        data.timing.flip()

    def consume_all(self) -> None:
        """Consume every action."""
        for action in self.action_type.variants():
            self.consume(action)

    def release_all(self) -> None:
        """Release every action."""
        for action in self.action_type.variants():
            self.release(action)

    def pressed(self, action: A) -> bool:
        """Is ``action`` currently pressed?"""
        return self.action_data(action).state.pressed()

    def just_pressed(self, action: A) -> bool:
        """Was ``action`` pressed since the last tick?"""
        return self.action_data(action).state.just_pressed()

    def released(self, action: A) -> bool:
        """Is ``action`` currently released?"""
        return self.action_data(action).state.released()

    def just_released(self, action: A) -> bool:
        """Was ``action`` released since the last tick?"""
        return self.action_data(action).state.just_released()

    def get_pressed(self) -> list[A]:
        """Every pressed action, in action order."""
        return [a for a in self.action_type.variants() if self.pressed(a)]

    def get_just_pressed(self) -> list[A]:
        """Every action pressed since the last tick, in action order."""
        return [a for a in self.action_type.variants() if self.just_pressed(a)]

    def get_released(self) -> list[A]:
        """Every released action, in action order."""
        return [a for a in self.action_type.variants() if self.released(a)]

    def get_just_released(self) -> list[A]:
        """Every action released since the last tick, in action order."""
        return [a for a in self.action_type.variants() if self.just_released(a)]

    def instant_started(self, action: A) -> float | None:
        """When ``action`` was last pressed or released; ``None`` until the next tick."""
        return self.action_data(action).timing.instant_started

    def current_duration(self, action: A) -> float:
        """How long ``action`` has been held or released."""
        return self.action_data(action).timing.current_duration

    def previous_duration(self, action: A) -> float:
        """How long ``action`` was held or released before its last change."""
        return self.action_data(action).timing.previous_duration


class ActionDiffKind(Enum):
    """Whether an action diff records a press or a release."""

    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class ActionDiff:
    """A minimal record of one press or release, for sending over a network.

    ``id`` is a stable identifier of the entity that owns the action state.
    """

    kind: ActionDiffKind
    action: Actionlike
    id: Hashable