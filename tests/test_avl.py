import math
import random

import pytest

from dskit.avl import AVLTree


def _within_avl_bound(tree):
    return tree.height() <= 1.45 * math.log2(len(tree) + 2)


def test_worked_example_preorder():
    tree = AVLTree([30, 20, 40, 10])
    assert tree.preorder() == [30, 20, 10, 40]


def test_sorted_insertion_stays_balanced():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 3
    assert tree.inorder() == list(range(1, 8))


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert tree.inorder() == []
    assert 5 not in tree


def test_duplicates_ignored():
    tree = AVLTree([5, 5, 3, 3, 9])
    assert len(tree) == 3
    assert tree.inorder() == [3, 5, 9]


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_random_inserts_sorted_and_balanced(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 500) for _ in range(300)]
    tree = AVLTree(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))
    assert _within_avl_bound(tree)


def test_delete_leaf_inner_and_root():
    tree = AVLTree([50, 30, 70, 20, 40, 60, 80])
    root = tree.preorder()[0]
    for key in (20, 30, root):
        tree.delete(key)
        assert key not in tree
    assert len(tree) == 4
    assert tree.inorder() == sorted({50, 30, 70, 20, 40, 60, 80} - {20, 30, root})


def test_delete_missing_key_is_noop():
    tree = AVLTree([1, 2, 3])
    before = tree.preorder()
    tree.delete(42)
    assert tree.preorder() == before
    assert len(tree) == 3


def test_delete_everything():
    values = list(range(20))
    tree = AVLTree(values)
    for value in values:
        tree.delete(value)
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.inorder() == []


def test_random_deletes_keep_balance():
    rng = random.Random(11)
    values = rng.sample(range(2000), 400)
    tree = AVLTree(values)
    removed = set(rng.sample(values, 250))
    for value in removed:
        tree.delete(value)
        assert _within_avl_bound(tree)
    assert tree.inorder() == sorted(set(values) - removed)
    assert all(value not in tree for value in removed)