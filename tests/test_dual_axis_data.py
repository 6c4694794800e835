import pytest

from inputactions.dual_axis_data import DualAxisData


def test_default_is_origin():
    data = DualAxisData()
    assert data.xy() == (0.0, 0.0)
    assert data.length() == 0.0


def test_from_xy_round_trip():
    data = DualAxisData.from_xy((0.25, -0.5))
    assert data.xy() == (0.25, -0.5)
    assert data == DualAxisData(0.25, -0.5)


def test_unpacking():
    x, y = DualAxisData(1.5, -2.0)
    assert (x, y) == (1.5, -2.0)


def test_merged_with_adds_components():
    merged = DualAxisData(1.0, 2.0).merged_with(DualAxisData(-0.5, 0.5))
    assert merged == DualAxisData(0.5, 2.5)


def test_merged_with_origin_is_identity():
    data = DualAxisData(0.3, -0.7)
    assert data.merged_with(DualAxisData()) == data


def test_length_of_right_triangle():
    assert DualAxisData(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("xy", [(0.0, 0.0), (1.0, 0.0), (-0.6, 0.8), (2.5, -7.0)])
def test_length_squared_matches_length(xy):
    data = DualAxisData.from_xy(xy)
    assert data.length_squared() == pytest.approx(data.length() ** 2)


def test_clamp_length_limits_magnitude():
    clamped = DualAxisData(3.0, 4.0).clamp_length(1.0)
    assert clamped.length() == pytest.approx(1.0)


def test_clamp_length_preserves_direction():
    clamped = DualAxisData(3.0, 4.0).clamp_length(1.0)
    assert clamped.x * 4.0 == pytest.approx(clamped.y * 3.0)
    assert clamped.x > 0 and clamped.y > 0


def test_clamp_length_leaves_short_vectors():
    data = DualAxisData(0.1, -0.2)
    assert data.clamp_length(1.0) == data


def test_data_is_immutable():
    data = DualAxisData(1.0, 1.0)
    with pytest.raises(AttributeError):
        data.x = 2.0
    assert data.xy() == (1.0, 1.0)
    assert data == DualAxisData(1.0, 1.0)