"""Directional axis-like inputs: analog sticks, triggers and mouse axes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Union

F32_MAX = 3.4028234663852886e38
"""The largest finite single-precision float, used as an unreachable threshold."""

F32_MIN = -F32_MAX
"""The most negative finite single-precision float."""


class GamepadAxisType(Enum):
    """An analog axis on a gamepad."""

    LEFT_STICK_X = "left_stick_x"
    LEFT_STICK_Y = "left_stick_y"
    LEFT_Z = "left_z"
    RIGHT_STICK_X = "right_stick_x"
    RIGHT_STICK_Y = "right_stick_y"
    RIGHT_Z = "right_z"


class MouseWheelAxisType(Enum):
    """An axis of mouse wheel movement."""

    X = "x"
    """Horizontal movement, supported only by some devices."""
    Y = "y"
    """Vertical movement, the usual scrolling direction."""


class MouseMotionAxisType(Enum):
    """An axis of mouse movement."""

    X = "x"
    Y = "y"


AxisType = Union[GamepadAxisType, MouseWheelAxisType, MouseMotionAxisType]
_AXIS_TYPES = (GamepadAxisType, MouseWheelAxisType, MouseMotionAxisType)


class AxisConversionError(ValueError):
    """An axis type could not be narrowed to the requested kind of axis."""


def _check_axis_type(axis_type: object) -> None:
    if not isinstance(axis_type, _AXIS_TYPES):
        raise TypeError(f"{axis_type!r} is not an axis type")


def as_gamepad_axis(axis_type: AxisType) -> GamepadAxisType:
    """Return ``axis_type`` if it is a gamepad axis, else raise AxisConversionError."""
    if isinstance(axis_type, GamepadAxisType):
        return axis_type
    raise AxisConversionError(f"{axis_type!r} is not a gamepad axis")


def as_mouse_wheel_axis(axis_type: AxisType) -> MouseWheelAxisType:
    """Return ``axis_type`` if it is a mouse wheel axis, else raise AxisConversionError."""
    if isinstance(axis_type, MouseWheelAxisType):
        return axis_type
    raise AxisConversionError(f"{axis_type!r} is not a mouse wheel axis")


def as_mouse_motion_axis(axis_type: AxisType) -> MouseMotionAxisType:
    """Return ``axis_type`` if it is a mouse motion axis, else raise AxisConversionError."""
    if isinstance(axis_type, MouseMotionAxisType):
        return axis_type
    raise AxisConversionError(f"{axis_type!r} is not a mouse motion axis")


def _float_key(value: float) -> float | str:
    """A key under which NaNs compare equal and both zeros coincide."""
    if math.isnan(value):
        return "nan"
    return value + 0.0


@dataclass(frozen=True, eq=False)
class SingleAxis:
    """A single directional axis with a configurable trigger zone.

    ``positive_low`` must be greater than or equal to ``negative_low``.
    ``inverted`` and ``value`` take no part in equality or hashing.
    """

    axis_type: AxisType
    positive_low: float
    negative_low: float
    inverted: bool = False
    sensitivity: float = 1.0
    value: float | None = None

    def __post_init__(self) -> None:
        _check_axis_type(self.axis_type)

    def _key(self) -> tuple:
        return (
            self.axis_type,
            _float_key(self.positive_low),
            _float_key(self.negative_low),
            _float_key(self.sensitivity),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleAxis):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def symmetric(cls, axis_type: AxisType, threshold: float) -> SingleAxis:
        """An axis triggered beyond ``threshold`` in either direction."""
        return cls(axis_type, positive_low=threshold, negative_low=-threshold)

    @classmethod
    def from_value(cls, axis_type: AxisType, value: float) -> SingleAxis:
        """An axis with zero thresholds carrying a target value, for input mocking."""
        return cls(axis_type, positive_low=0.0, negative_low=0.0, value=value)

    @classmethod
    def mouse_wheel_x(cls) -> SingleAxis:
        """Horizontal mouse wheel movement."""
        return cls(MouseWheelAxisType.X, positive_low=0.0, negative_low=0.0)

    @classmethod
    def mouse_wheel_y(cls) -> SingleAxis:
        """Vertical mouse wheel movement."""
        return cls(MouseWheelAxisType.Y, positive_low=0.0, negative_low=0.0)

    @classmethod
    def mouse_motion_x(cls) -> SingleAxis:
        """Horizontal mouse movement."""
        return cls(MouseMotionAxisType.X, positive_low=0.0, negative_low=0.0)

    @classmethod
    def mouse_motion_y(cls) -> SingleAxis:
        """Vertical mouse movement."""
        return cls(MouseMotionAxisType.Y, positive_low=0.0, negative_low=0.0)

    @classmethod
    def negative_only(cls, axis_type: AxisType, threshold: float) -> SingleAxis:
        """An axis with ``negative_low`` set to ``threshold``; positive values never trigger it."""
        return cls(axis_type, positive_low=F32_MAX, negative_low=threshold)

    @classmethod
    def positive_only(cls, axis_type: AxisType, threshold: float) -> SingleAxis:
        """An axis with ``positive_low`` set to ``threshold``; negative values never trigger it."""
        return cls(axis_type, positive_low=threshold, negative_low=F32_MIN)

    def with_deadzone(self, deadzone: float) -> SingleAxis:
        """This axis with a symmetric deadzone of ``deadzone``."""
        return replace(self, negative_low=-deadzone, positive_low=deadzone)

    def with_sensitivity(self, sensitivity: float) -> SingleAxis:
        """This axis with its sensitivity multiplier set to ``sensitivity``."""
        return replace(self, sensitivity=sensitivity)

    def invert(self) -> SingleAxis:
        """This axis with its inversion flag toggled."""
        return replace(self, inverted=not self.inverted)


class DeadZoneShape(ABC):
    """The shape of the deadzone of a dual-axis input.

    Points on the boundary of the shape count as outside it.
    """

    @abstractmethod
    def input_outside_deadzone(self, x: float, y: float) -> bool:
        """Is the point ``(x, y)`` outside the deadzone?"""


def _outside_rectangle(x: float, y: float, width: float, height: float) -> bool:
    return x >= width or x <= -width or y >= height or y <= -height


@dataclass(frozen=True)
class CrossDeadZone(DeadZoneShape):
    """A deadzone shaped as the union of two centred rectangles."""

    rect_1_width: float
    rect_1_height: float
    rect_2_width: float
    rect_2_height: float

    def input_outside_deadzone(self, x: float, y: float) -> bool:
        return _outside_rectangle(
            x, y, self.rect_1_width, self.rect_1_height
        ) and _outside_rectangle(x, y, self.rect_2_width, self.rect_2_height)


@dataclass(frozen=True)
class RectDeadZone(DeadZoneShape):
    """A rectangular deadzone."""

    width: float
    height: float

    def input_outside_deadzone(self, x: float, y: float) -> bool:
        return _outside_rectangle(x, y, self.width, self.height)


@dataclass(frozen=True)
class EllipseDeadZone(DeadZoneShape):
    """An elliptical deadzone; a zero radius lets every input through."""

    radius_x: float
    radius_y: float

    def input_outside_deadzone(self, x: float, y: float) -> bool:
        if self.radius_x == 0.0 or self.radius_y == 0.0:
            return True
        return (x / self.radius_x) ** 2 + (y / self.radius_y) ** 2 >= 1.0


@dataclass(frozen=True)
class DualAxis:
    """Two directional axes combined into one input with a shared deadzone."""

    DEFAULT_DEADZONE: ClassVar[float] = 0.1
    DEFAULT_DEADZONE_SHAPE: ClassVar[DeadZoneShape] = EllipseDeadZone(0.1, 0.1)

    x: SingleAxis
    y: SingleAxis
    deadzone: DeadZoneShape = field(
        default_factory=lambda: DualAxis.DEFAULT_DEADZONE_SHAPE
    )

    @classmethod
    def symmetric(
        cls,
        x_axis_type: AxisType,
        y_axis_type: AxisType,
        deadzone_shape: DeadZoneShape,
    ) -> DualAxis:
        """Two zero-threshold axes sharing ``deadzone_shape``."""
        return cls(
            SingleAxis.symmetric(x_axis_type, 0.0),
            SingleAxis.symmetric(y_axis_type, 0.0),
            deadzone_shape,
        )

    @classmethod
    def from_value(
        cls,
        x_axis_type: AxisType,
        y_axis_type: AxisType,
        x_value: float,
        y_value: float,
    ) -> DualAxis:
        """Two axes carrying target values, for input mocking."""
        return cls(
            SingleAxis.from_value(x_axis_type, x_value),
            SingleAxis.from_value(y_axis_type, y_value),
            cls.DEFAULT_DEADZONE_SHAPE,
        )

    @classmethod
    def left_stick(cls) -> DualAxis:
        """The left analog stick of a gamepad."""
        return cls.symmetric(
            GamepadAxisType.LEFT_STICK_X,
            GamepadAxisType.LEFT_STICK_Y,
            cls.DEFAULT_DEADZONE_SHAPE,
        )

    @classmethod
    def right_stick(cls) -> DualAxis:
        """The right analog stick of a gamepad."""
        return cls.symmetric(
            GamepadAxisType.RIGHT_STICK_X,
            GamepadAxisType.RIGHT_STICK_Y,
            cls.DEFAULT_DEADZONE_SHAPE,
        )

    @classmethod
    def mouse_wheel(cls) -> DualAxis:
        """Horizontal and vertical mouse wheel movement."""
        return cls(
            SingleAxis.mouse_wheel_x(),
            SingleAxis.mouse_wheel_y(),
            cls.DEFAULT_DEADZONE_SHAPE,
        )

    @classmethod
    def mouse_motion(cls) -> DualAxis:
        """Horizontal and vertical mouse movement."""
        return cls(
            SingleAxis.mouse_motion_x(),
            SingleAxis.mouse_motion_y(),
            cls.DEFAULT_DEADZONE_SHAPE,
        )

    def with_deadzone(self, deadzone: DeadZoneShape) -> DualAxis:
        """This input with its deadzone replaced by ``deadzone``."""
        return replace(self, deadzone=deadzone)

    def with_sensitivity(self, x_sensitivity: float, y_sensitivity: float) -> DualAxis:
        """This input with the sensitivity of each axis set."""
        return replace(
            self,
            x=self.x.with_sensitivity(x_sensitivity),
            y=self.y.with_sensitivity(y_sensitivity),
        )

    def inverted_x(self) -> DualAxis:
        """This input with the X axis inversion toggled."""
        return replace(self, x=self.x.invert())

    def inverted_y(self) -> DualAxis:
        """This input with the Y axis inversion toggled."""
        return replace(self, y=self.y.invert())

    def inverted(self) -> DualAxis:
        """This input with the inversion of both axes toggled."""
        return replace(self, x=self.x.invert(), y=self.y.invert())