import numpy as np
import pytest

from permtest.stats.labels import Group, LabelAssignment


def test_initial_layout_control_then_treatment():
    a = LabelAssignment(3, 2)
    assert len(a) == 5
    assert a.labels.tolist() == [[0, 0, 0, 1, 1]]
    assert a.labels[0, 0] == Group.CONTROL


def test_reshuffling_conserves_label_counts():
    a = LabelAssignment(9, 7, rows=50)
    rng = np.random.default_rng(1)
    for _ in range(200):
        a.shuffle(rng)
        n_c, n_t = a.counts()
        assert (n_c == 9).all()
        assert (n_t == 7).all()


def test_shuffle_is_in_place_and_moves_labels():
    a = LabelAssignment(5, 5, rows=20)
    before = a.labels.copy()
    out = a.shuffle(np.random.default_rng(2))
    assert out is a.labels
    assert not np.array_equal(before, a.labels)


def test_rejects_empty_group():
    with pytest.raises(ValueError):
        LabelAssignment(0, 3)
