# inputactions

A small library with no dependencies for tracking game *actions* without
caring which device produced them. You describe what a player can do as an
enumeration. For every action, `inputactions` then tracks whether it is
pressed or released, how long it has been in that state, and any analogue
value that came with it.

## Installation

```
pip install inputactions
```

## Defining actions

Subclass `inputactions.actionlike.Actionlike`, which is an `enum.Enum`. Every
member has a stable index, which is its position in definition order. Give each
member a distinct value, for example with `enum.auto()`:

```python
from enum import auto
from inputactions.actionlike import Actionlike

class Action(Actionlike):
    RUN = auto()
    JUMP = auto()
    HIDE = auto()

Action.n_variants()       # 3
Action.get_at(1)          # Action.JUMP
Action.get_at(7)          # None
Action.JUMP.index()       # 1
list(Action.variants())   # [Action.RUN, Action.JUMP, Action.HIDE]
```

## Button states

`inputactions.buttonlike.ButtonState` has four members: `JUST_PRESSED`,
`PRESSED`, `JUST_RELEASED` and `RELEASED`. The members are immutable, so
`press()`, `release()` and `tick()` each return the resulting state.
`pressed()`, `released()`, `just_pressed()` and `just_released()` query a state.

## Tracking action state

`inputactions.action_state.ActionState` holds one `ActionData` for each action
of an enumeration. An `ActionData` has a `state`, a `value`, an `axis_pair`, a
`timing` and a `consumed` flag. Instants and durations are plain numbers in
seconds, taken from any monotonic clock of your choosing.

```python
from inputactions.action_state import ActionState

state = ActionState(Action)
state.press(Action.JUMP)
assert state.pressed(Action.JUMP) and state.just_pressed(Action.JUMP)

state.tick(1.0, 0.0)            # "just" flags expire, timings advance
assert not state.just_pressed(Action.JUMP)
assert state.instant_started(Action.JUMP) == 0.0
assert state.current_duration(Action.JUMP) == 1.0

state.release(Action.JUMP)
assert state.just_released(Action.JUMP)
assert state.previous_duration(Action.JUMP) == 1.0
assert state.instant_started(Action.JUMP) is None
```

A consumed action is released, and it cannot be pressed again until it has
been released:

```python
state.press(Action.RUN)
state.consume(Action.RUN)
state.press(Action.RUN)         # ignored
assert state.released(Action.RUN)
state.release(Action.RUN)
state.press(Action.RUN)
assert state.pressed(Action.RUN)
```

Other members of `ActionState`:

- `update(action_data)` takes one `ActionData` for each action, in action order.
  For each action it presses or releases the action and copies its `value` and
  `axis_pair`. It raises `ValueError` if the count is wrong.
- `release_all()` releases every action, and `consume_all()` consumes every
  action.
- `get_pressed()`, `get_just_pressed()`, `get_released()` and
  `get_just_released()` list actions in action order.
- `value()` and `clamped_value()` give the action's value, the second clamped to
  `[-1, 1]`. `axis_pair()` and `clamped_axis_pair()` give its `DualAxisData` or
  `None`.
- `action_data()` returns the live data of an action, and `set_action_data()`
  replaces it. Use them, for example, to copy state between two enumerations.
- Passing an action of the wrong enumeration raises `TypeError`.

`ActionDiff` is a small frozen record for sending presses and releases over a
network. It holds a `kind` (`ActionDiffKind.PRESSED` or
`ActionDiffKind.RELEASED`), an `action` and a hashable `id`.

## Axes and dead zones

`inputactions.axislike` describes analogue inputs. An axis type is a
`GamepadAxisType`, a `MouseWheelAxisType` or a `MouseMotionAxisType`.
`as_gamepad_axis()`, `as_mouse_wheel_axis()` and `as_mouse_motion_axis()`
narrow an axis type to one kind, or raise `AxisConversionError`.

`SingleAxis` is one axis with trigger thresholds. Its constructors are
`symmetric()`, `from_value()`, `positive_only()`, `negative_only()`,
`mouse_wheel_x()`, `mouse_wheel_y()`, `mouse_motion_x()` and
`mouse_motion_y()`. `with_deadzone()`, `with_sensitivity()` and `invert()`
each return a changed copy. The `inverted` flag and `value` do not count
towards equality or hashing.

`DualAxis` combines two axes with a dead-zone shape. Its constructors are
`left_stick()`, `right_stick()`, `mouse_wheel()`, `mouse_motion()`,
`symmetric()` and `from_value()`. Copies come from `with_deadzone()`,
`with_sensitivity()`, `inverted_x()`, `inverted_y()` and `inverted()`. The
default dead zone is `EllipseDeadZone(0.1, 0.1)`.

The dead-zone shapes are `CrossDeadZone`, `RectDeadZone` and
`EllipseDeadZone`. Points on the boundary count as outside, and an ellipse with
a zero radius lets every point through.

```python
from inputactions.axislike import DualAxis, EllipseDeadZone

stick = DualAxis.left_stick().with_deadzone(EllipseDeadZone(0.2, 0.2))
stick.deadzone.input_outside_deadzone(0.5, 0.0)   # True
stick.deadzone.input_outside_deadzone(0.1, 0.1)   # False
```

## Dual-axis data

`inputactions.dual_axis_data.DualAxisData` is a frozen `(x, y)` pair. It
provides `from_xy()`, `xy()`, `length()`, `length_squared()` and
`merged_with()`, which adds two pairs. `clamp_length(max_length)` returns a
copy scaled down to at most that length. It also unpacks: `x, y = data`.

## Virtual inputs

`inputactions.virtual_inputs` provides two classes:

- `VirtualDPad` has the four fields `up`, `down`, `left` and `right`.
  `VirtualDPad.mouse_wheel()` and `VirtualDPad.mouse_motion()` build one from
  the `MouseWheelDirection` and `MouseMotionDirection` members.
  `inverted_x()`, `inverted_y()` and `inverted()` swap opposite inputs.
- `VirtualAxis` has the two fields `negative` and `positive`. `inverted()`
  swaps them.

The fields accept any hashable value that identifies a button.

## Driving state from other objects

`inputactions.driver.ActionStateDriver` pairs an `action` with its `targets`,
the entities whose action state it should drive. The targets are an
`ActionStateDriverTarget`, and entities are any hashable identifiers. A target
supports `len()`, iteration and `in`. It provides `insert()`, `remove()`,
`add()`, `is_empty()`, `from_entities()` and the copying forms `with_entity()`
and `without()`. If a target holds a single entity, removing any entity from it
leaves it empty.

## What this package does not do

`inputactions` keeps state only. It does not read keyboards, mice or gamepads.
It does not map physical keys or buttons to actions, and it cannot resolve
clashes between bindings. It also has no clock or frame loop of its own. Your
code decides which actions are pressed, and your code calls `tick()` with the
instants from its own clock.