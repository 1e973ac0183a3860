import pytest

from cell_pattern import EMPTY, FILLED, UNCERTAIN, merge, merge_known, to_pattern
from errors import MergeConflict

ALL = [EMPTY, UNCERTAIN, FILLED]


def test_to_pattern():
    assert to_pattern(EMPTY) == EMPTY
    assert to_pattern(FILLED) == FILLED
    with pytest.raises(ValueError):
        to_pattern(UNCERTAIN)


def test_merge_is_commutative():
    for x in ALL:
        for y in ALL:
            assert merge(x, y) == merge(y, x)


def test_merge_consensus():
    assert merge(EMPTY, EMPTY) == EMPTY
    assert merge(FILLED, FILLED) == FILLED
    assert merge(EMPTY, FILLED) == UNCERTAIN
    assert merge(UNCERTAIN, EMPTY) == UNCERTAIN
    assert merge(UNCERTAIN, FILLED) == UNCERTAIN
    assert merge(UNCERTAIN, UNCERTAIN) == UNCERTAIN


def test_merge_is_idempotent():
    for x in ALL:
        assert merge(x, x) == x


def test_merge_known_uncertain_yields_other():
    for v in ALL:
        assert merge_known(UNCERTAIN, v) == v
        assert merge_known(v, UNCERTAIN) == v


def test_merge_known_agreement():
    assert merge_known(EMPTY, EMPTY) == EMPTY
    assert merge_known(FILLED, FILLED) == FILLED


@pytest.mark.parametrize("x,y", [(EMPTY, FILLED), (FILLED, EMPTY)])
def test_merge_known_conflict(x, y):
    with pytest.raises(MergeConflict):
        merge_known(x, y)
