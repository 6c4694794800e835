from inputactions.buttonlike import MouseMotionDirection, MouseWheelDirection
from inputactions.virtual_inputs import VirtualAxis, VirtualDPad


def _pad():
    return VirtualDPad(up="w", down="s", left="a", right="d")


def test_inverted_y_swaps_up_and_down():
    pad = _pad().inverted_y()
    assert (pad.up, pad.down, pad.left, pad.right) == ("s", "w", "a", "d")


def test_inverted_x_swaps_left_and_right():
    pad = _pad().inverted_x()
    assert (pad.up, pad.down, pad.left, pad.right) == ("w", "s", "d", "a")


def test_inverted_swaps_both():
    pad = _pad().inverted()
    assert (pad.up, pad.down, pad.left, pad.right) == ("s", "w", "d", "a")


def test_inverted_equals_both_single_inversions():
    assert _pad().inverted() == _pad().inverted_x().inverted_y()


def test_double_inversion_is_identity():
    assert _pad().inverted().inverted() == _pad()
    assert _pad().inverted_x().inverted_x() == _pad()


def test_inversion_leaves_original_untouched():
    pad = _pad()
    pad.inverted()
    assert pad.up == "w"


def test_mouse_wheel_pad():
    pad = VirtualDPad.mouse_wheel()
    assert pad.up is MouseWheelDirection.UP
    assert pad.down is MouseWheelDirection.DOWN
    assert pad.left is MouseWheelDirection.LEFT
    assert pad.right is MouseWheelDirection.RIGHT


def test_mouse_motion_pad():
    pad = VirtualDPad.mouse_motion()
    assert pad.up is MouseMotionDirection.UP
    assert pad.right is MouseMotionDirection.RIGHT


def test_pads_hash_by_value():
    assert len({_pad(), _pad(), _pad().inverted()}) == 2


def test_virtual_axis_inverted():
    axis = VirtualAxis(negative="left", positive="right").inverted()
    assert axis == VirtualAxis(negative="right", positive="left")


def test_virtual_axis_double_inversion_is_identity():
    axis = VirtualAxis(negative=MouseWheelDirection.DOWN, positive=MouseWheelDirection.UP)
    assert axis.inverted().inverted() == axis
    assert axis.inverted() != axis