"""Virtual axes and direction pads assembled from button-like inputs."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, replace

from inputactions.buttonlike import MouseMotionDirection, MouseWheelDirection


@dataclass(frozen=True)
class VirtualDPad:
    """A direction pad built from four button-like inputs, yielding a dual-axis value."""

    up: Hashable
    down: Hashable
    left: Hashable
    right: Hashable

    @classmethod
    def mouse_wheel(cls) -> VirtualDPad:
        """A pad driven by discrete mouse wheel movements."""
        return cls(
            up=MouseWheelDirection.UP,
            down=MouseWheelDirection.DOWN,
            left=MouseWheelDirection.LEFT,
            right=MouseWheelDirection.RIGHT,
        )

    @classmethod
    def mouse_motion(cls) -> VirtualDPad:
        """A pad driven by discrete mouse motions."""
        return cls(
            up=MouseMotionDirection.UP,
            down=MouseMotionDirection.DOWN,
            left=MouseMotionDirection.LEFT,
            right=MouseMotionDirection.RIGHT,
        )

    def inverted_y(self) -> VirtualDPad:
        """This pad with ``up`` and ``down`` swapped."""
        return replace(self, up=self.down, down=self.up)

    def inverted_x(self) -> VirtualDPad:
        """This pad with ``left`` and ``right`` swapped."""
        return replace(self, left=self.right, right=self.left)

    def inverted(self) -> VirtualDPad:
        """This pad with both pairs of opposite inputs swapped."""
        return VirtualDPad(up=self.down, down=self.up, left=self.right, right=self.left)


@dataclass(frozen=True)
class VirtualAxis:
    """A single axis built from two button-like inputs, yielding a value in ``[-1, 1]``."""

    negative: Hashable
    positive: Hashable

    def inverted(self) -> VirtualAxis:
        """This axis with its negative and positive inputs swapped."""
        return VirtualAxis(negative=self.positive, positive=self.negative)