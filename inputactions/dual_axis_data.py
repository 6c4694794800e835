"""The combined value of two input axes."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DualAxisData:
    """The processed position of two combined input axes.

    The neutral origin is always ``(0, 0)``. Gamepad axes stay within
    ``[-1.0, 1.0]`` on each axis, but other inputs such as mouse wheel
    data may not.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_xy(cls, xy: tuple[float, float]) -> DualAxisData:
        """Build the data from an ``(x, y)`` pair."""
        x, y = xy
        return cls(x, y)

    def merged_with(self, other: DualAxisData) -> DualAxisData:
        """The sum of this position and ``other``.

        The result may have a larger magnitude than either input; use
        :meth:`clamp_length` to bound it.
        """
        return DualAxisData(self.x + other.x, self.y + other.y)

    def xy(self) -> tuple[float, float]:
        """The ``(x, y)`` values as a pair."""
        return (self.x, self.y)

    def length(self) -> float:
        """The distance of this position from the origin."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """The square of :meth:`length`, avoiding the square root."""
        return self.x * self.x + self.y * self.y

    def clamp_length(self, max_length: float) -> DualAxisData:
        """This position scaled down, if needed, to a length of at most ``max_length``."""
        length_squared = self.length_squared()
        if length_squared > max_length * max_length:
            scale = max_length / math.sqrt(length_squared)
            return DualAxisData(self.x * scale, self.y * scale)
        return self

    def __iter__(self):
        yield self.x
        yield self.y