"""Button-like input states and discrete mouse directions."""

from __future__ import annotations

from enum import Enum


class ButtonState(Enum):
    """The current state of a button, usually tied to a single action.

    Buttons start out ``RELEASED``. Instances are immutable, so the
    transition methods return the resulting state.
    """

    JUST_PRESSED = "just_pressed"
    PRESSED = "pressed"
    JUST_RELEASED = "just_released"
    RELEASED = "released"

    def tick(self) -> ButtonState:
        """Return the state once the "just" part of a transition has worn off."""
        if self is ButtonState.JUST_PRESSED:
            return ButtonState.PRESSED
        if self is ButtonState.JUST_RELEASED:
            return ButtonState.RELEASED
        return self

    def press(self) -> ButtonState:
        """Return the state after pressing: ``JUST_PRESSED`` unless already ``PRESSED``."""
        if self is ButtonState.PRESSED:
            return self
        return ButtonState.JUST_PRESSED

    def release(self) -> ButtonState:
        """Return the state after releasing: ``JUST_RELEASED`` unless already ``RELEASED``."""
        if self is ButtonState.RELEASED:
            return self
        return ButtonState.JUST_RELEASED

    def pressed(self) -> bool:
        """Is the button currently pressed?"""
        return self in (ButtonState.PRESSED, ButtonState.JUST_PRESSED)

    def released(self) -> bool:
        """Is the button currently released?"""
        return self in (ButtonState.RELEASED, ButtonState.JUST_RELEASED)

    def just_pressed(self) -> bool:
        """Was the button pressed since the most recent tick?"""
        return self is ButtonState.JUST_PRESSED

    def just_released(self) -> bool:
        """Was the button released since the most recent tick?"""
        return self is ButtonState.JUST_RELEASED


class MouseWheelDirection(Enum):
    """A button-like input triggered by net mouse wheel movement in one direction."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"


class MouseMotionDirection(Enum):
    """A button-like input triggered by net mouse motion in one direction."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"