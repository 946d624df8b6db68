import pytest

from algokit.bst import BinarySearchTree

VALUES = [45, 39, 56, 12, 54, 78, 10, 34, 67, 89, 32, 81]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_preorder_starts_and_postorder_ends_with_root(tree):
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]
    assert sorted(tree.preorder()) == sorted(VALUES)
    assert sorted(tree.postorder()) == sorted(VALUES)


def test_smallest_and_largest(tree):
    assert tree.smallest() == min(VALUES)
    assert tree.largest() == max(VALUES)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.height() == 0
    assert tree.total_nodes() == 0
    with pytest.raises(ValueError):
        tree.smallest()
    with pytest.raises(ValueError):
        tree.largest()


def test_counts(tree):
    assert tree.total_nodes() == len(VALUES) == len(tree)
    assert tree.external_nodes() + tree.internal_nodes() == tree.total_nodes()


def test_small_tree_shape():
    tree = BinarySearchTree([2, 1, 3])
    assert tree.preorder() == [2, 1, 3]
    assert tree.postorder() == [1, 3, 2]
    assert tree.external_nodes() == 2
    assert tree.internal_nodes() == 1
    assert tree.height() == 2


def test_sorted_insert_is_a_chain():
    tree = BinarySearchTree(range(50))
    assert tree.height() == 50
    assert tree.external_nodes() == 1


def test_duplicates_kept(tree):
    tree.insert(45)
    assert tree.inorder() == sorted(VALUES + [45])


@pytest.mark.parametrize("value", VALUES)
def test_delete_each_value(value):
    tree = BinarySearchTree(VALUES)
    tree.delete(value)
    expected = sorted(VALUES)
    expected.remove(value)
    assert tree.inorder() == expected
    assert len(tree) == len(expected) == tree.total_nodes()


def test_delete_all(tree):
    for value in VALUES:
        tree.delete(value)
    assert tree.inorder() == []
    assert len(tree) == 0


def test_delete_missing(tree):
    with pytest.raises(KeyError):
        tree.delete(1000)


def test_mirror(tree):
    preorder = tree.preorder()
    tree.mirror()
    assert tree.inorder() == sorted(VALUES, reverse=True)
    assert tree.preorder()[0] == preorder[0]
    tree.mirror()
    assert tree.preorder() == preorder


def test_clear(tree):
    tree.clear()
    assert len(tree) == 0
    assert tree.inorder() == []