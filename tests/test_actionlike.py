import pytest

from inputactions.actionlike import Actionlike

NAMES = ["RUN", "JUMP", "HIDE"]


def test_n_variants_matches_members():
    action = Actionlike("Action", NAMES)
    assert action.n_variants() == 3
    assert Actionlike.n_variants() == 0


def test_index_follows_definition_order():
    action = Actionlike("Action", NAMES)
    assert action.RUN.index() == 0
    assert action.JUMP.index() == 1
    assert action.HIDE.index() == 2


@pytest.mark.parametrize("name", NAMES)
def test_get_at_round_trip(name):
    action = Actionlike("Action", NAMES)
    member = action[name]
    assert action.get_at(member.index()) is member


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_at_out_of_range(index):
    action = Actionlike("Action", NAMES)
    assert action.get_at(index) is None


def test_get_at_on_empty():
    assert Actionlike.get_at(0) is None


def test_variants_in_order():
    action = Actionlike("Action", NAMES)
    assert [a.name for a in action.variants()] == NAMES
    assert [a.index() for a in action.variants()] == [0, 1, 2]