import random

import pytest

from algokit.bst import BinarySearchTree

EXAMPLE = [50, 30, 70, 20, 40, 60, 80]


def test_traversals_of_worked_example():
    tree = BinarySearchTree(EXAMPLE)
    assert tree.preorder() == [50, 30, 20, 40, 70, 60, 80]
    assert tree.postorder() == [20, 40, 30, 60, 80, 70, 50]
    assert tree.inorder() == sorted(EXAMPLE)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_inorder_is_sorted_distinct(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(80)]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))


def test_root_is_first_and_last_of_pre_and_post_order():
    values = [12, 4, 30, 1, 8, 25]
    tree = BinarySearchTree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]


def test_preorder_rebuild_round_trip():
    rng = random.Random(9)
    tree = BinarySearchTree(rng.sample(range(1000), 100))
    rebuilt = BinarySearchTree(tree.preorder())
    assert rebuilt.preorder() == tree.preorder()
    assert rebuilt.postorder() == tree.postorder()


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree([5, 3])
    assert tree.insert(5) is False
    assert tree.insert(7) is True
    assert len(tree) == 3


def test_contains():
    tree = BinarySearchTree(EXAMPLE)
    assert all(v in tree for v in EXAMPLE)
    assert 55 not in tree
    assert 0 not in BinarySearchTree()


def test_delete_leaf_one_child_and_two_children():
    values = list(EXAMPLE) + [65]
    tree = BinarySearchTree(values)
    for target in (20, 60, 30):
        assert tree.delete(target) is True
        values.remove(target)
        assert target not in tree
        assert tree.inorder() == sorted(values)
    assert len(tree) == len(values)


def test_delete_root_takes_inorder_successor():
    tree = BinarySearchTree(EXAMPLE)
    successor = sorted(EXAMPLE)[sorted(EXAMPLE).index(EXAMPLE[0]) + 1]
    tree.delete(EXAMPLE[0])
    assert tree.preorder()[0] == successor


def test_delete_missing_is_noop():
    tree = BinarySearchTree(EXAMPLE)
    assert tree.delete(999) is False
    assert tree.inorder() == sorted(EXAMPLE)
    assert BinarySearchTree().delete(1) is False


def test_delete_everything_in_random_order():
    rng = random.Random(4)
    values = rng.sample(range(500), 120)
    tree = BinarySearchTree(values)
    remaining = set(values)
    for v in rng.sample(values, len(values)):
        tree.delete(v)
        remaining.discard(v)
        assert tree.inorder() == sorted(remaining)
    assert len(tree) == 0
    assert tree.preorder() == []


def test_sorted_input_does_not_exhaust_recursion():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert tree.inorder() == values
    assert tree.postorder() == values[::-1]