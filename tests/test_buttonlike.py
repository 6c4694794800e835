import pytest

from inputactions.buttonlike import ButtonState


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.PRESSED),
        (ButtonState.PRESSED, ButtonState.PRESSED),
        (ButtonState.JUST_RELEASED, ButtonState.RELEASED),
        (ButtonState.RELEASED, ButtonState.RELEASED),
    ],
)
def test_tick(state, expected):
    assert state.tick() is expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.JUST_PRESSED),
        (ButtonState.PRESSED, ButtonState.PRESSED),
        (ButtonState.JUST_RELEASED, ButtonState.JUST_PRESSED),
        (ButtonState.RELEASED, ButtonState.JUST_PRESSED),
    ],
)
def test_press(state, expected):
    assert state.press() is expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.JUST_RELEASED),
        (ButtonState.PRESSED, ButtonState.JUST_RELEASED),
        (ButtonState.JUST_RELEASED, ButtonState.JUST_RELEASED),
        (ButtonState.RELEASED, ButtonState.RELEASED),
    ],
)
def test_release(state, expected):
    assert state.release() is expected


@pytest.mark.parametrize(
    "name, is_pressed",
    [
        ("JUST_PRESSED", True),
        ("PRESSED", True),
        ("JUST_RELEASED", False),
        ("RELEASED", False),
    ],
)
def test_pressed_is_negation_of_released(name, is_pressed):
    state = ButtonState[name]
    assert ButtonState.pressed(state) is is_pressed
    assert ButtonState.released(state) is (not is_pressed)


def test_queries():
    assert ButtonState.JUST_PRESSED.pressed()
    assert ButtonState.JUST_PRESSED.just_pressed()
    assert not ButtonState.PRESSED.just_pressed()
    assert ButtonState.JUST_RELEASED.released()
    assert ButtonState.JUST_RELEASED.just_released()
    assert not ButtonState.RELEASED.just_released()
    assert not ButtonState.RELEASED.pressed()


def test_full_lifecycle():
    state = ButtonState.RELEASED
    state = state.press()
    assert state.just_pressed()
    state = state.tick()
    assert state.pressed() and not state.just_pressed()
    state = state.release()
    assert state.just_released()
    state = state.tick()
    assert state.released() and not state.just_released()