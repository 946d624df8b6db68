import pytest

from algokit.fenwick import FenwickTree

SOURCE_VALUES = [2, 4, 5, 5, 6, 6, 6, 7, 7, 8, 9]


def build(values):
    tree = FenwickTree(len(values))
    for position, value in enumerate(values, start=1):
        tree.adjust(position, value)
    return tree


def test_source_example_before_update():
    tree = build(SOURCE_VALUES)
    assert tree.rsq_range(1, 2) == 6
    assert tree.rsq_range(1, 4) == 16


def test_source_example_after_update():
    values = list(SOURCE_VALUES)
    tree = build(values)
    tree.adjust(2, -4)
    values[1] -= 4
    assert tree.rsq_range(1, 2) == sum(values[:2])
    assert tree.rsq_range(1, 4) == sum(values[:4])


def test_every_range_matches_slice_sum():
    tree = build(SOURCE_VALUES)
    n = len(SOURCE_VALUES)
    for a in range(1, n + 1):
        for b in range(a, n + 1):
            assert tree.rsq_range(a, b) == sum(SOURCE_VALUES[a - 1:b])


def test_prefix_sums():
    tree = build(SOURCE_VALUES)
    assert tree.rsq(0) == 0
    assert tree.rsq(len(SOURCE_VALUES)) == sum(SOURCE_VALUES)


def test_adjust_out_of_range():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.adjust(0, 1)
    with pytest.raises(IndexError):
        tree.adjust(5, 1)


def test_rsq_out_of_range():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.rsq(5)
    with pytest.raises(IndexError):
        tree.rsq_range(0, 2)


def test_empty_range_rejected():
    tree = FenwickTree(4)
    with pytest.raises(ValueError):
        tree.rsq_range(3, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)